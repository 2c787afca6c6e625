"""Pydantic models for the OpenWeatherMap 5-day forecast response.

Only the fields the pager reads are modelled; everything else in the
payload is ignored. Temperature and condition text sit one level below
each list item and are flattened by :meth:`ForecastResponse.samples`.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from forecast_pager.schemas import ForecastSample


class MainBlock(BaseModel):
    """``main`` block of a list item (temperatures in Kelvin by default)."""

    temp: float


class WeatherCondition(BaseModel):
    """One entry of a list item's ``weather`` array."""

    description: str
    main: str | None = None
    icon: str | None = None


class ForecastItem(BaseModel):
    """A single 3-hour interval as delivered by the API."""

    dt: int
    main: MainBlock
    weather: list[WeatherCondition] = Field(..., min_length=1)
    dt_txt: str | None = None

    def to_sample(self) -> ForecastSample:
        """Flatten to the pager's sample shape (first weather condition wins)."""
        return ForecastSample(
            timestamp=self.dt,
            temperature_kelvin=self.main.temp,
            description=self.weather[0].description,
        )


class Coordinates(BaseModel):
    lat: float
    lon: float


class CityInfo(BaseModel):
    """``city`` block describing where the forecast applies."""

    name: str | None = None
    country: str | None = None
    coord: Coordinates | None = None
    timezone: int | None = Field(default=None, description="UTC offset in seconds")


class ForecastResponse(BaseModel):
    """Top-level forecast envelope."""

    # "200" on success, numeric on some error responses
    cod: int | str | None = None
    cnt: int | None = None
    items: list[ForecastItem] = Field(default_factory=list, alias="list")
    city: CityInfo | None = None

    def samples(self) -> list[ForecastSample]:
        """All intervals as flat samples, in payload order."""
        return [item.to_sample() for item in self.items]
