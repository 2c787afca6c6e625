"""Forecast Pager - a 5-day weather forecast, one calendar day at a time.

Architecture::

    datasources/   API payload adapters (OpenWeatherMap 5-day / 3-hour forecast)
    analysis/      ForecastView: day grouping and cursor navigation
    formatting.py  Date keys, time labels, Kelvin -> Celsius display
    schemas.py     Pydantic domain models (ForecastSample, DayGroup, ViewState)
    config.py      Settings from environment (display time zone, logging)
    cli.py         Page through a saved payload from the terminal

Data flow: payload (fetched by the caller) -> datasources -> analysis -> caller UI
"""

__version__ = "0.1.0"

from forecast_pager.analysis import ForecastView, NoForecastLoadedError
from forecast_pager.config import Settings
from forecast_pager.schemas import DayGroup, ForecastSample, ViewState

__all__ = [
    "DayGroup",
    "ForecastSample",
    "ForecastView",
    "NoForecastLoadedError",
    "Settings",
    "ViewState",
    "__version__",
]
