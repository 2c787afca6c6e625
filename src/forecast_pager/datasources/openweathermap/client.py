"""OpenWeatherMap forecast endpoint constants and query builders.

API docs: https://openweathermap.org/forecast5

Only the query shape lives here. Callers own the HTTP layer and the API key
and pass the resulting params (plus ``appid``) to their own client.
"""

from __future__ import annotations

FORECAST_API = "http://api.openweathermap.org/data/2.5/forecast"


def by_city(name: str) -> dict[str, str]:
    """Query params for a forecast looked up by city name, e.g. ``"Oslo,no"``."""
    name = name.strip()
    if not name:
        raise ValueError("city name must not be empty")
    return {"q": name}


def by_coordinates(lat: float, lon: float) -> dict[str, float]:
    """Query params for a forecast at a map coordinate."""
    if not -90 <= lat <= 90:
        raise ValueError(f"latitude out of range: {lat}")
    if not -180 <= lon <= 180:
        raise ValueError(f"longitude out of range: {lon}")
    return {"lat": lat, "lon": lon}
