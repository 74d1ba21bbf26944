"""
Weather tool handlers.

Each handler takes already-validated arguments, runs a short fetch/format
pipeline and always returns the text shown to the caller. Upstream failures
and empty results become fixed messages; nothing here raises for them.
"""

import logging
from typing import Optional

from weather_api.formatters import (
    format_alerts_report,
    format_current_conditions,
    format_forecast_report,
    format_point_forecast,
)
from weather_api.nws import NWSClient
from weather_api.openweather import OpenWeatherClient, location_label, select_daily_entries

logger = logging.getLogger(__name__)

ALERTS_FAILED = "Failed to retrieve alerts data"
FORECAST_URL_MISSING = "Failed to get forecast URL from grid point data"
FORECAST_FAILED = "Failed to retrieve forecast data"
NO_FORECAST_PERIODS = "No forecast periods available"
API_KEY_MISSING = (
    "OpenWeatherMap API key not found. "
    "Please set OPENWEATHER_API_KEY environment variable."
)


async def get_alerts(nws: NWSClient, state: str) -> str:
    state_code = state.upper()
    alerts = await nws.fetch_alerts(state_code)
    if alerts is None:
        return ALERTS_FAILED
    if not alerts:
        return f"No active alerts for {state_code}"
    return format_alerts_report(state_code, alerts)


async def get_forecast(nws: NWSClient, latitude: float, longitude: float) -> str:
    """Two-stage lookup: coordinates -> grid point -> forecast periods."""
    grid_point = await nws.fetch_grid_point(latitude, longitude)
    if grid_point is None:
        return (
            f"Failed to retrieve grid point data for coordinates: {latitude}, {longitude}. "
            "This location may not be supported by the NWS API "
            "(only US locations are supported)."
        )
    if not grid_point.forecast_url:
        return FORECAST_URL_MISSING

    periods = await nws.fetch_forecast_periods(grid_point)
    if periods is None:
        return FORECAST_FAILED
    if not periods:
        return NO_FORECAST_PERIODS
    return format_point_forecast(latitude, longitude, periods)


async def get_current_weather(
    openweather: OpenWeatherClient, city: str, country: Optional[str] = None
) -> str:
    if not openweather.api_key:
        logger.warning("get_current_weather called without an OpenWeatherMap API key")
        return API_KEY_MISSING

    conditions = await openweather.fetch_current(city, country)
    if conditions is None:
        return (
            f"Failed to retrieve weather data for {location_label(city, country)}. "
            "Please check the city name."
        )
    return format_current_conditions(conditions)


async def get_weather_forecast(
    openweather: OpenWeatherClient,
    city: str,
    country: Optional[str] = None,
    days: int = 3,
) -> str:
    if not openweather.api_key:
        logger.warning("get_weather_forecast called without an OpenWeatherMap API key")
        return API_KEY_MISSING

    report = await openweather.fetch_forecast(city, country)
    if report is None:
        return (
            f"Failed to retrieve forecast data for {location_label(city, country)}. "
            "Please check the city name."
        )

    daily = select_daily_entries(report.entries, days)
    if not daily:
        return f"No forecast data available for {location_label(city, country)}"
    return format_forecast_report(report, daily, days)
