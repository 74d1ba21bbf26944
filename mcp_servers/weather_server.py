#!/usr/bin/env python
"""MCP server exposing US (NWS) and worldwide (OpenWeatherMap) weather tools."""

import logging
import sys
from pathlib import Path
from typing import Annotated, List, Optional

# Add parent directory to path to import our modules
sys.path.append(str(Path(__file__).parent.parent))

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from weather_api import handlers
from weather_api.http_fetcher import WeatherFetcher
from weather_api.nws import NWSClient
from weather_api.openweather import MAX_FORECAST_DAYS, OpenWeatherClient
from weather_api.settings import WeatherSettings, configure_logging

logger = logging.getLogger(__name__)

SERVER_NAME = "worldwide-weather"


def create_server(
    settings: WeatherSettings, fetcher: Optional[WeatherFetcher] = None
) -> FastMCP:
    """
    Build the weather MCP server and register its tools.

    Args:
        settings: Configuration (API key, endpoints, timeout) for this server
        fetcher: HTTP fetcher shared by both API clients (built from settings if omitted)

    Returns:
        FastMCP server with get_alerts, get_forecast, get_current_weather and get_weather_forecast
    """
    fetcher = fetcher or WeatherFetcher(timeout=settings.request_timeout)
    nws = NWSClient(fetcher, settings.nws_api_base, settings.user_agent)
    openweather = OpenWeatherClient(
        fetcher, settings.openweather_api_key, settings.openweather_api_base
    )

    mcp = FastMCP(SERVER_NAME)

    @mcp.tool(name="get_alerts", description="Get weather alerts for a state")
    async def get_alerts(
        state: Annotated[
            str,
            Field(
                min_length=2,
                max_length=2,
                description="Two-letter state code (e.g. CA, NY)",
            ),
        ],
    ) -> str:
        return await handlers.get_alerts(nws, state)

    @mcp.tool(name="get_forecast", description="Get weather forecast for a location")
    async def get_forecast(
        latitude: Annotated[
            float, Field(ge=-90, le=90, description="Latitude of the location")
        ],
        longitude: Annotated[
            float, Field(ge=-180, le=180, description="Longitude of the location")
        ],
    ) -> str:
        return await handlers.get_forecast(nws, latitude, longitude)

    @mcp.tool(
        name="get_current_weather",
        description="Get current weather for any city worldwide",
    )
    async def get_current_weather(
        city: Annotated[
            str, Field(description="City name (e.g., Tokyo, London, New York)")
        ],
        country: Annotated[
            Optional[str],
            Field(description="Country code (optional, e.g., JP, GB, US)"),
        ] = None,
    ) -> str:
        return await handlers.get_current_weather(openweather, city, country)

    @mcp.tool(
        name="get_weather_forecast",
        description="Get 5-day weather forecast for any city worldwide",
    )
    async def get_weather_forecast(
        city: Annotated[
            str, Field(description="City name (e.g., Tokyo, London, New York)")
        ],
        country: Annotated[
            Optional[str],
            Field(description="Country code (optional, e.g., JP, GB, US)"),
        ] = None,
        days: Annotated[
            int,
            Field(
                ge=1,
                le=MAX_FORECAST_DAYS,
                description="Number of days to forecast (1-5, default: 3)",
            ),
        ] = 3,
    ) -> str:
        return await handlers.get_weather_forecast(openweather, city, country, days)

    return mcp


def main(argv: Optional[List[str]] = None) -> None:
    argv = sys.argv[1:] if argv is None else argv
    transport = "sse" if "--sse" in argv else "stdio"
    try:
        settings = WeatherSettings.from_env()
        configure_logging(settings.log_level)
        if not settings.has_openweather_key:
            logger.warning(
                "OPENWEATHER_API_KEY is not set; worldwide weather tools will report it"
            )
        mcp = create_server(settings)
        logger.info("Worldwide Weather MCP Server running on %s", transport)
        mcp.run(transport=transport)
    except Exception as e:
        print(f"Fatal error in main(): {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
