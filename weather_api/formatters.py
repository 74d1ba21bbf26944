"""
Text formatting for weather tool responses.

Each record type has a ``*_display`` projection that turns its optional fields
into display strings (fallback tokens included), and a ``format_*`` function
that lays those strings out in a fixed line order. List entries end with a
``---`` line so joined entries read as a report.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from weather_api.nws import AlertRecord, ForecastPeriod
from weather_api.openweather import CurrentConditions, ForecastEntry, ForecastReport

UNKNOWN = "Unknown"
NO_HEADLINE = "No headline"
NO_FORECAST = "No forecast available"
SEPARATOR = "---"


def display_value(value: Any, fallback: str = UNKNOWN) -> str:
    """Render a field, substituting ``fallback`` when it is missing or empty."""
    if value is None or value == "":
        return fallback
    return str(value)


def _bearing(deg: Optional[float]) -> str:
    return f"{deg}°" if deg is not None else UNKNOWN


def _visibility_km(meters: Optional[float]) -> str:
    if meters is None:
        return UNKNOWN
    return f"{meters / 1000:.1f} km"


def _local_date(timestamp: Optional[int]) -> str:
    if timestamp is None:
        return UNKNOWN
    return datetime.fromtimestamp(timestamp).strftime("%x")


# NWS


def alert_display(alert: AlertRecord) -> Dict[str, str]:
    return {
        "event": display_value(alert.event),
        "area": display_value(alert.area),
        "severity": display_value(alert.severity),
        "status": display_value(alert.status),
        "headline": display_value(alert.headline, NO_HEADLINE),
    }


def format_alert(alert: AlertRecord) -> str:
    d = alert_display(alert)
    return "\n".join(
        [
            f"Event: {d['event']}",
            f"Area: {d['area']}",
            f"Severity: {d['severity']}",
            f"Status: {d['status']}",
            f"Headline: {d['headline']}",
            SEPARATOR,
        ]
    )


def format_alerts_report(state_code: str, alerts: List[AlertRecord]) -> str:
    body = "\n".join(format_alert(alert) for alert in alerts)
    return f"Active alerts for {state_code}:\n\n{body}"


def forecast_period_display(period: ForecastPeriod) -> Dict[str, str]:
    return {
        "name": display_value(period.name),
        "temperature": display_value(period.temperature),
        "temperature_unit": display_value(period.temperature_unit, "F"),
        "wind_speed": display_value(period.wind_speed),
        "wind_direction": display_value(period.wind_direction, ""),
        "short_forecast": display_value(period.short_forecast, NO_FORECAST),
    }


def format_forecast_period(period: ForecastPeriod) -> str:
    d = forecast_period_display(period)
    return "\n".join(
        [
            f"{d['name']}:",
            f"Temperature: {d['temperature']}°{d['temperature_unit']}",
            f"Wind: {d['wind_speed']} {d['wind_direction']}".rstrip(),
            d["short_forecast"],
            SEPARATOR,
        ]
    )


def format_point_forecast(
    latitude: float, longitude: float, periods: List[ForecastPeriod]
) -> str:
    body = "\n".join(format_forecast_period(period) for period in periods)
    return f"Forecast for {latitude}, {longitude}:\n\n{body}"


# OpenWeatherMap


def current_conditions_display(conditions: CurrentConditions) -> Dict[str, str]:
    return {
        "city": display_value(conditions.city),
        "country": display_value(conditions.country),
        "temperature": display_value(conditions.temperature),
        "feels_like": display_value(conditions.feels_like),
        "description": display_value(conditions.description),
        "humidity": display_value(conditions.humidity),
        "pressure": display_value(conditions.pressure),
        "wind_speed": display_value(conditions.wind_speed),
        "wind_direction": _bearing(conditions.wind_deg),
        "visibility": _visibility_km(conditions.visibility),
    }


def format_current_conditions(conditions: CurrentConditions) -> str:
    d = current_conditions_display(conditions)
    return "\n".join(
        [
            f"Current weather for {d['city']}, {d['country']}:",
            f"Temperature: {d['temperature']}°C (feels like {d['feels_like']}°C)",
            f"Weather: {d['description']}",
            f"Humidity: {d['humidity']}%",
            f"Pressure: {d['pressure']} hPa",
            f"Wind: {d['wind_speed']} m/s {d['wind_direction']}",
            f"Visibility: {d['visibility']}",
        ]
    )


def forecast_entry_display(entry: ForecastEntry) -> Dict[str, str]:
    return {
        "date": _local_date(entry.timestamp),
        "temperature": display_value(entry.temperature),
        "feels_like": display_value(entry.feels_like),
        "description": display_value(entry.description),
        "humidity": display_value(entry.humidity),
        "wind_speed": display_value(entry.wind_speed),
        "wind_direction": _bearing(entry.wind_deg),
    }


def format_forecast_entry(entry: ForecastEntry) -> str:
    d = forecast_entry_display(entry)
    return "\n".join(
        [
            f"{d['date']}:",
            f"Temperature: {d['temperature']}°C (feels like {d['feels_like']}°C)",
            f"Weather: {d['description']}",
            f"Humidity: {d['humidity']}%",
            f"Wind: {d['wind_speed']} m/s {d['wind_direction']}",
            SEPARATOR,
        ]
    )


def format_forecast_report(
    report: ForecastReport, entries: List[ForecastEntry], days: int
) -> str:
    body = "\n".join(format_forecast_entry(entry) for entry in entries)
    city = display_value(report.city)
    country = display_value(report.country)
    return f"{days}-day forecast for {city}, {country}:\n\n{body}"
