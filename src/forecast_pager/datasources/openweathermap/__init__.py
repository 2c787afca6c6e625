"""OpenWeatherMap 5-day / 3-hour forecast payloads.

Public API:
  - client: FORECAST_API, by_city, by_coordinates (query shape only)
  - models: ForecastResponse, ForecastItem, CityInfo
  - parse: parse_response, parse_forecast
"""

from forecast_pager.datasources.openweathermap.client import (
    FORECAST_API,
    by_city,
    by_coordinates,
)
from forecast_pager.datasources.openweathermap.models import (
    CityInfo,
    ForecastItem,
    ForecastResponse,
)
from forecast_pager.datasources.openweathermap.parse import parse_forecast, parse_response

__all__ = [
    "FORECAST_API",
    "CityInfo",
    "ForecastItem",
    "ForecastResponse",
    "by_city",
    "by_coordinates",
    "parse_forecast",
    "parse_response",
]
