"""
Domain models for forecast pager.

Pydantic models shared by the payload adapter and the day-paginated view.
These define the canonical schema - datasources normalize API responses to these.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

# Latest epoch second whose local date stays within year 9999 for any UTC offset
MAX_TIMESTAMP = 253402214399

# =============================================================================
# Forecast samples
# =============================================================================


class ForecastSample(BaseModel):
    """One 3-hour forecast interval, flattened from the API record."""

    model_config = ConfigDict(frozen=True)

    timestamp: int = Field(
        ..., ge=0, le=MAX_TIMESTAMP, description="Validity time, seconds since epoch (UTC)"
    )
    temperature_kelvin: float = Field(..., description="Absolute temperature")
    description: str = Field(..., description="Short condition text, e.g. 'light rain'")


# =============================================================================
# Derived views
# =============================================================================


class DayGroup(BaseModel):
    """A local calendar date and the samples that fall on it, in time order."""

    model_config = ConfigDict(frozen=True)

    date: str = Field(..., description="Local date key (YYYY-MM-DD)")
    samples: list[ForecastSample] = Field(default_factory=list)


class ViewState(BaseModel):
    """Everything a UI needs to draw the currently selected day."""

    model_config = ConfigDict(frozen=True)

    has_data: bool
    day_count: int = 0
    selected_date: str | None = None
    samples: list[ForecastSample] = Field(default_factory=list)
    can_go_previous: bool = False
    can_go_next: bool = False

    @classmethod
    def empty(cls) -> ViewState:
        """State shown when no forecast data is available."""
        return cls(has_data=False)
