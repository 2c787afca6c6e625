"""Group a flat 3-hour forecast into calendar days and page through them.

A forecast payload arrives as one time-ordered list of samples spanning
roughly five days. :class:`ForecastView` splits it into local calendar days
(in an explicit display time zone) and keeps a cursor on the selected day.
Navigation only moves the cursor; a new :meth:`ForecastView.load` replaces
everything.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from forecast_pager.config import get_settings
from forecast_pager.formatting import local_date_key
from forecast_pager.schemas import DayGroup, ViewState

if TYPE_CHECKING:
    from collections.abc import Sequence
    from datetime import tzinfo

    from forecast_pager.schemas import ForecastSample

logger = logging.getLogger(__name__)


class NoForecastLoadedError(LookupError):
    """Raised when a selected day is requested but no samples are loaded."""


class ForecastView:
    """Day-paginated view over one forecast set.

    Args:
        tz: Display time zone for day boundaries. Defaults to the
            configured ``Settings.timezone``.
    """

    def __init__(self, tz: tzinfo | None = None) -> None:
        self.tz = tz if tz is not None else get_settings().tzinfo
        self._samples: tuple[ForecastSample, ...] = ()
        self._keys: tuple[str, ...] = ()
        self._dates: tuple[str, ...] = ()
        self._cursor: int | None = None

    # -- source state ---------------------------------------------------------

    def load(self, samples: Sequence[ForecastSample]) -> ViewState:
        """Install a new forecast set and select its first day.

        Samples must be ascending by timestamp. An empty set leaves the view
        without data: the cursor is unset and navigation does nothing.
        """
        samples = tuple(samples)
        keys = tuple(local_date_key(s.timestamp, self.tz) for s in samples)
        dates = tuple(dict.fromkeys(keys))

        self._samples, self._keys, self._dates = samples, keys, dates
        self._cursor = 0 if dates else None

        logger.debug("Loaded %d samples across %d days", len(samples), len(dates))
        return self.state()

    # -- read-only accessors --------------------------------------------------

    @property
    def has_data(self) -> bool:
        return self._cursor is not None

    @property
    def cursor(self) -> int | None:
        return self._cursor

    @property
    def dates(self) -> tuple[str, ...]:
        return self._dates

    @property
    def day_count(self) -> int:
        return len(self._dates)

    @property
    def can_go_previous(self) -> bool:
        return self._cursor is not None and self._cursor > 0

    @property
    def can_go_next(self) -> bool:
        return self._cursor is not None and self._cursor + 1 < len(self._dates)

    def _group(self, date_key: str) -> DayGroup:
        samples = [s for s, key in zip(self._samples, self._keys) if key == date_key]
        return DayGroup(date=date_key, samples=samples)

    def selected_day(self) -> DayGroup:
        """The selected date and its samples in original order.

        Raises:
            NoForecastLoadedError: Nothing (or an empty set) is loaded.
        """
        if self._cursor is None:
            raise NoForecastLoadedError("no forecast samples loaded")
        return self._group(self._dates[self._cursor])

    def day_groups(self) -> list[DayGroup]:
        """Every day of the loaded set, in order."""
        return [self._group(d) for d in self._dates]

    def state(self) -> ViewState:
        """Snapshot of the view for rendering."""
        if self._cursor is None:
            return ViewState.empty()
        day = self.selected_day()
        return ViewState(
            has_data=True,
            day_count=self.day_count,
            selected_date=day.date,
            samples=day.samples,
            can_go_previous=self.can_go_previous,
            can_go_next=self.can_go_next,
        )

    # -- navigation -----------------------------------------------------------

    def next(self) -> bool:
        """Advance to the following day. Returns False at the last day."""
        if self._cursor is None or self._cursor + 1 >= len(self._dates):
            return False
        self._cursor += 1
        logger.debug("Selected day %d/%d", self._cursor + 1, self.day_count)
        return True

    def previous(self) -> bool:
        """Go back one day. Returns False at the first day."""
        if self._cursor is None or self._cursor == 0:
            return False
        self._cursor -= 1
        logger.debug("Selected day %d/%d", self._cursor + 1, self.day_count)
        return True
