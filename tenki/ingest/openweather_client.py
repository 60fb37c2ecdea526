"""OpenWeatherMap current-weather API client."""

import logging

import httpx

logger = logging.getLogger(__name__)

OPENWEATHER_BASE_URL = "https://api.openweathermap.org/data/2.5"
DEFAULT_USER_AGENT = "tenki/0.1.0"


class OpenWeatherClientError(Exception):
    """Raised when OpenWeatherMap returns an error or cannot be reached."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class OpenWeatherClient:
    """Async wrapper around the /weather endpoint.

    No retries: a failed call is reported to the caller as-is.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = OPENWEATHER_BASE_URL,
        units: str = "metric",
        lang: str = "ja",
        timeout: float = 10.0,
        user_agent: str = DEFAULT_USER_AGENT,
    ):
        if not api_key:
            raise OpenWeatherClientError("OpenWeatherMap API key not set")
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.units = units
        self.lang = lang
        self.timeout = timeout
        self.user_agent = user_agent

    async def get_current(self, query_name: str, country: str) -> dict:
        """Fetch current conditions for ``query_name,country``."""
        url = f"{self.base_url}/weather"
        params = {
            "q": f"{query_name},{country}",
            "appid": self.api_key,
            "units": self.units,
            "lang": self.lang,
        }
        headers = {"User-Agent": self.user_agent}
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                resp = await client.get(url, params=params, headers=headers)
        except httpx.RequestError as e:
            logger.error("OpenWeatherMap request failed for q=%s: %s", query_name, e)
            raise OpenWeatherClientError(f"Request failed: {e}") from e

        if not resp.is_success:
            logger.error(
                "OpenWeatherMap %d for q=%s: %s",
                resp.status_code, query_name, resp.text,
            )
            raise OpenWeatherClientError(
                f"HTTP {resp.status_code}", resp.status_code
            )
        try:
            return resp.json()
        except ValueError as e:
            raise OpenWeatherClientError(f"Invalid JSON body: {e}") from e
