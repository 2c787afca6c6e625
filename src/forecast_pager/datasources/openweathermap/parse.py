"""Turn a decoded forecast payload into pager samples."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from forecast_pager.datasources.openweathermap.models import ForecastResponse

if TYPE_CHECKING:
    from forecast_pager.schemas import ForecastSample

logger = logging.getLogger(__name__)


def parse_response(payload: dict[str, Any]) -> ForecastResponse:
    """
    Validate a decoded JSON payload against the forecast response model.

    Args:
        payload: ``response.json()`` of a ``data/2.5/forecast`` call.

    Returns:
        The parsed envelope. A payload without a ``list`` key parses to an
        envelope with no items.

    Raises:
        pydantic.ValidationError: An item is missing ``dt``, ``main.temp``
            or has an empty ``weather`` array.
    """
    response = ForecastResponse.model_validate(payload)
    city = response.city.name if response.city else None
    logger.debug("Parsed forecast payload: %d items, city=%s", len(response.items), city)
    return response


def parse_forecast(payload: dict[str, Any]) -> list[ForecastSample]:
    """Flatten a decoded forecast payload to a list of samples."""
    return parse_response(payload).samples()
