"""Shared fixtures: synthetic 3-hour forecast samples and API payloads."""

from __future__ import annotations

from typing import Any

import pytest

from forecast_pager.schemas import ForecastSample

# Mon 2026-10-19 00:00 UTC
T0 = 1792368000
STEP = 3 * 60 * 60
DAY = 24 * 60 * 60


def make_samples(start: int, count: int, kelvin: float = 285.15) -> list[ForecastSample]:
    """``count`` consecutive 3-hour samples beginning at ``start``."""
    return [
        ForecastSample(
            timestamp=start + i * STEP,
            temperature_kelvin=kelvin + i,
            description=f"sample {i}",
        )
        for i in range(count)
    ]


def make_item(dt: int, temp: float = 285.15, description: str = "clear sky") -> dict[str, Any]:
    """One ``list`` entry shaped like the forecast API returns it."""
    return {
        "dt": dt,
        "main": {"temp": temp, "feels_like": temp - 1, "humidity": 70},
        "weather": [{"id": 800, "main": "Clear", "description": description, "icon": "01d"}],
        "wind": {"speed": 3.1, "deg": 200},
        "dt_txt": "",
    }


@pytest.fixture
def two_day_samples() -> list[ForecastSample]:
    """00:00 through 21:00 of day one, then 00:00 of day two (UTC)."""
    return make_samples(T0, 9)


@pytest.fixture
def five_day_samples() -> list[ForecastSample]:
    """A full 40-sample forecast starting at midnight UTC."""
    return make_samples(T0, 40)


@pytest.fixture
def forecast_payload() -> dict[str, Any]:
    """Decoded forecast response covering two UTC days."""
    items = [make_item(T0 + i * STEP, temp=280.15 + i) for i in range(9)]
    items[3]["weather"][0]["description"] = "light rain"
    return {
        "cod": "200",
        "message": 0,
        "cnt": len(items),
        "list": items,
        "city": {
            "id": 3143244,
            "name": "Oslo",
            "coord": {"lat": 59.9127, "lon": 10.7461},
            "country": "NO",
            "timezone": 7200,
        },
    }
