"""Domain logic over normalized forecast samples.

Dependency rule: analysis/ imports from ``schemas`` and ``formatting`` only.
It never fetches data or produces output.

Modules:
  - forecast_view: flat sample list -> day-grouped, cursor-navigated view
"""

from forecast_pager.analysis.forecast_view import (
    ForecastView,
    NoForecastLoadedError,
)

__all__ = ["ForecastView", "NoForecastLoadedError"]
