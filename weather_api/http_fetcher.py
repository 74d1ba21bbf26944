"""Single-attempt JSON GET helper shared by the NWS and OpenWeatherMap clients."""

import logging
from typing import Any, Dict, Mapping, Optional
from urllib.parse import urlencode

import httpx

logger = logging.getLogger(__name__)


class WeatherFetcher:
    """Issue one GET per call and return the parsed JSON body, or None on any failure."""

    def __init__(
        self,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.timeout = timeout
        self.transport = transport

    async def fetch_json(
        self, url: str, headers: Optional[Mapping[str, str]] = None
    ) -> Optional[Any]:
        """Fetch a URL and parse its JSON body."""
        return await self._get(url, headers, log_target=url)

    async def fetch_query(
        self, base: str, path: str, params: Dict[str, str]
    ) -> Optional[Any]:
        """
        Fetch ``{base}/{path}`` with an encoded query string.

        Args:
            base: API base URL (e.g. "https://api.openweathermap.org/data/2.5")
            path: Endpoint path segment (e.g. "weather")
            params: Query parameters, encoded as given

        Returns:
            Parsed JSON payload, or None if the request failed
        """
        endpoint = f"{base.rstrip('/')}/{path.lstrip('/')}"
        url = f"{endpoint}?{urlencode(params)}"
        # The query string carries the API key, so only the endpoint is logged.
        return await self._get(url, None, log_target=endpoint)

    async def _get(
        self, url: str, headers: Optional[Mapping[str, str]], log_target: str
    ) -> Optional[Any]:
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self.transport
            ) as client:
                response = await client.get(url, headers=headers)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            logger.error(
                "Error making request to %s: HTTP error! status: %s",
                log_target,
                e.response.status_code,
            )
            return None
        except httpx.HTTPError as e:
            logger.error("Error making request to %s: %s", log_target, e)
            return None
        except ValueError as e:
            logger.error("Invalid JSON from %s: %s", log_target, e)
            return None
