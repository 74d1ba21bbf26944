"""National Weather Service (api.weather.gov) client: alerts and the two-stage point forecast."""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from weather_api.http_fetcher import WeatherFetcher
from weather_api.settings import NWS_API_BASE, USER_AGENT


@dataclass(frozen=True)
class AlertRecord:
    event: Optional[str] = None
    area: Optional[str] = None
    severity: Optional[str] = None
    status: Optional[str] = None
    headline: Optional[str] = None

    @classmethod
    def from_feature(cls, feature: Dict[str, Any]) -> "AlertRecord":
        props = (feature or {}).get("properties") or {}
        return cls(
            event=props.get("event"),
            area=props.get("areaDesc"),
            severity=props.get("severity"),
            status=props.get("status"),
            headline=props.get("headline"),
        )


@dataclass(frozen=True)
class ForecastPeriod:
    name: Optional[str] = None
    temperature: Optional[float] = None
    temperature_unit: Optional[str] = None
    wind_speed: Optional[str] = None
    wind_direction: Optional[str] = None
    short_forecast: Optional[str] = None

    @classmethod
    def from_payload(cls, period: Dict[str, Any]) -> "ForecastPeriod":
        period = period or {}
        return cls(
            name=period.get("name"),
            temperature=period.get("temperature"),
            temperature_unit=period.get("temperatureUnit"),
            wind_speed=period.get("windSpeed"),
            wind_direction=period.get("windDirection"),
            short_forecast=period.get("shortForecast"),
        )


@dataclass(frozen=True)
class GridPoint:
    """Result of the first forecast stage: where to find the location's forecast."""

    latitude: float
    longitude: float
    forecast_url: Optional[str] = None


class NWSClient:
    """Thin wrapper around the NWS endpoints used by the weather tools."""

    def __init__(
        self,
        fetcher: WeatherFetcher,
        api_base: str = NWS_API_BASE,
        user_agent: str = USER_AGENT,
    ):
        self.fetcher = fetcher
        self.api_base = api_base.rstrip("/")
        self.user_agent = user_agent

    @property
    def headers(self) -> Dict[str, str]:
        # NWS rejects requests without an identifying User-Agent.
        return {"User-Agent": self.user_agent, "Accept": "application/geo+json"}

    async def fetch_alerts(self, state_code: str) -> Optional[List[AlertRecord]]:
        """Active alerts for a two-letter area code; None if the request failed."""
        data = await self.fetcher.fetch_json(
            f"{self.api_base}/alerts?area={state_code}", headers=self.headers
        )
        if not isinstance(data, dict):
            return None
        features = data.get("features") or []
        return [AlertRecord.from_feature(feature) for feature in features]

    async def fetch_grid_point(
        self, latitude: float, longitude: float
    ) -> Optional[GridPoint]:
        """Stage 1: resolve coordinates to the grid point's forecast URL."""
        data = await self.fetcher.fetch_json(
            f"{self.api_base}/points/{latitude:.4f},{longitude:.4f}",
            headers=self.headers,
        )
        if not isinstance(data, dict):
            return None
        props = data.get("properties") or {}
        return GridPoint(
            latitude=latitude, longitude=longitude, forecast_url=props.get("forecast")
        )

    async def fetch_forecast_periods(
        self, grid_point: GridPoint
    ) -> Optional[List[ForecastPeriod]]:
        """Stage 2: fetch the forecast periods behind a resolved grid point."""
        if not grid_point.forecast_url:
            return None
        data = await self.fetcher.fetch_json(
            grid_point.forecast_url, headers=self.headers
        )
        if not isinstance(data, dict):
            return None
        periods = (data.get("properties") or {}).get("periods") or []
        return [ForecastPeriod.from_payload(period) for period in periods]
