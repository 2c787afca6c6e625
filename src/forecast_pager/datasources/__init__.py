"""External data source adapters.

Each subdirectory is one data source with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # API URLs, constants, query builders
    ├── models.py         # Pydantic models for API responses
    └── parse.py          # Payload -> ForecastSample list

Adapters never perform HTTP themselves: callers fetch the payload and hand
the decoded JSON to ``parse``.

Adding a new datasource
-----------------------
1. Create ``datasources/{name}/`` with files above.
   See ``openweathermap/`` for the reference adapter.

2. Write a parse function that returns pager samples::

       from forecast_pager.schemas import ForecastSample

       def parse_forecast(payload: dict[str, Any]) -> list[ForecastSample]:
           ...

3. Re-export public API in ``__init__.py`` with ``__all__``.

4. Add tests in ``tests/test_{name}.py``.
"""
