"""OpenWeatherMap client for current conditions and the 5 day / 3 hour forecast."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from weather_api.http_fetcher import WeatherFetcher
from weather_api.settings import OPENWEATHER_API_BASE

# The forecast endpoint returns one entry every 3 hours.
ENTRIES_PER_DAY = 8
MAX_FORECAST_DAYS = 5


def _first_description(payload: Dict[str, Any]) -> Optional[str]:
    weather = payload.get("weather") or [{}]
    return (weather[0] or {}).get("description")


@dataclass(frozen=True)
class CurrentConditions:
    city: Optional[str] = None
    country: Optional[str] = None
    temperature: Optional[float] = None
    feels_like: Optional[float] = None
    description: Optional[str] = None
    humidity: Optional[float] = None
    pressure: Optional[float] = None
    wind_speed: Optional[float] = None
    wind_deg: Optional[float] = None
    visibility: Optional[float] = None

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "CurrentConditions":
        main = payload.get("main") or {}
        wind = payload.get("wind") or {}
        return cls(
            city=payload.get("name"),
            country=(payload.get("sys") or {}).get("country"),
            temperature=main.get("temp"),
            feels_like=main.get("feels_like"),
            description=_first_description(payload),
            humidity=main.get("humidity"),
            pressure=main.get("pressure"),
            wind_speed=wind.get("speed"),
            wind_deg=wind.get("deg"),
            visibility=payload.get("visibility"),
        )


@dataclass(frozen=True)
class ForecastEntry:
    timestamp: Optional[int] = None
    temperature: Optional[float] = None
    feels_like: Optional[float] = None
    description: Optional[str] = None
    humidity: Optional[float] = None
    wind_speed: Optional[float] = None
    wind_deg: Optional[float] = None

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "ForecastEntry":
        payload = payload or {}
        main = payload.get("main") or {}
        wind = payload.get("wind") or {}
        return cls(
            timestamp=payload.get("dt"),
            temperature=main.get("temp"),
            feels_like=main.get("feels_like"),
            description=_first_description(payload),
            humidity=main.get("humidity"),
            wind_speed=wind.get("speed"),
            wind_deg=wind.get("deg"),
        )


@dataclass(frozen=True)
class ForecastReport:
    city: Optional[str] = None
    country: Optional[str] = None
    entries: List[ForecastEntry] = field(default_factory=list)

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "ForecastReport":
        city = payload.get("city") or {}
        return cls(
            city=city.get("name"),
            country=city.get("country"),
            entries=[ForecastEntry.from_payload(item) for item in payload.get("list") or []],
        )


def select_daily_entries(entries: List[ForecastEntry], days: int) -> List[ForecastEntry]:
    """Pick one entry per 24h (every 8th 3-hour slot), then keep the first ``days``."""
    return entries[::ENTRIES_PER_DAY][:days]


def location_query(city: str, country: Optional[str] = None) -> str:
    return f"{city},{country}" if country else city


def location_label(city: str, country: Optional[str] = None) -> str:
    return f"{city}, {country}" if country else city


class OpenWeatherClient:
    """OpenWeatherMap endpoints, always queried in metric units."""

    def __init__(
        self,
        fetcher: WeatherFetcher,
        api_key: Optional[str],
        api_base: str = OPENWEATHER_API_BASE,
    ):
        self.fetcher = fetcher
        self.api_key = api_key
        self.api_base = api_base.rstrip("/")

    def _params(self, city: str, country: Optional[str]) -> Dict[str, str]:
        return {
            "q": location_query(city, country),
            "appid": self.api_key or "",
            "units": "metric",
        }

    async def fetch_current(
        self, city: str, country: Optional[str] = None
    ) -> Optional[CurrentConditions]:
        data = await self.fetcher.fetch_query(
            self.api_base, "weather", self._params(city, country)
        )
        if not isinstance(data, dict):
            return None
        return CurrentConditions.from_payload(data)

    async def fetch_forecast(
        self, city: str, country: Optional[str] = None
    ) -> Optional[ForecastReport]:
        data = await self.fetcher.fetch_query(
            self.api_base, "forecast", self._params(city, country)
        )
        if not isinstance(data, dict):
            return None
        return ForecastReport.from_payload(data)
