"""Runtime settings for the weather MCP server, loaded from the environment / .env."""

import logging
import os
import sys
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

NWS_API_BASE = "https://api.weather.gov"
OPENWEATHER_API_BASE = "https://api.openweathermap.org/data/2.5"
USER_AGENT = "weather-app/1.0"


def _optional(value: Optional[str]) -> Optional[str]:
    if value is None or not value.strip():
        return None
    return value.strip()


@dataclass(frozen=True)
class WeatherSettings:
    """Explicit configuration handed to the server at startup."""

    openweather_api_key: Optional[str] = None
    nws_api_base: str = NWS_API_BASE
    openweather_api_base: str = OPENWEATHER_API_BASE
    user_agent: str = USER_AGENT
    request_timeout: Optional[float] = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "WeatherSettings":
        """
        Build settings from environment variables.

        Args:
            env: Mapping to read from (defaults to os.environ after loading .env)

        Returns:
            WeatherSettings with defaults for anything not set
        """
        if env is None:
            load_dotenv()
            env = os.environ

        timeout = _optional(env.get("WEATHER_HTTP_TIMEOUT"))
        return cls(
            openweather_api_key=_optional(env.get("OPENWEATHER_API_KEY")),
            nws_api_base=(_optional(env.get("NWS_API_BASE")) or NWS_API_BASE).rstrip("/"),
            openweather_api_base=(
                _optional(env.get("OPENWEATHER_API_BASE")) or OPENWEATHER_API_BASE
            ).rstrip("/"),
            user_agent=_optional(env.get("WEATHER_USER_AGENT")) or USER_AGENT,
            request_timeout=float(timeout) if timeout else None,
            log_level=(_optional(env.get("LOG_LEVEL")) or "INFO").upper(),
        )

    @property
    def has_openweather_key(self) -> bool:
        return self.openweather_api_key is not None


def configure_logging(level: str = "INFO") -> None:
    """Send log records to stderr; stdout belongs to the stdio transport."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )
