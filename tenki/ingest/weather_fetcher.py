"""OpenWeatherMap provider: fetches and normalizes current conditions."""

import logging
import math

from tenki.ingest.openweather_client import OpenWeatherClient, OpenWeatherClientError
from tenki.ingest.providers import ProviderError
from tenki.models.common import DEFAULT_DATE_FORMAT, format_observed_date
from tenki.models.weather import CityEntry, WeatherResult

logger = logging.getLogger(__name__)


class OpenWeatherProvider:
    def __init__(
        self,
        client: OpenWeatherClient,
        country: str = "JP",
        date_format: str = DEFAULT_DATE_FORMAT,
    ):
        self.client = client
        self.country = country
        self.date_format = date_format

    async def get_weather(self, city: CityEntry) -> WeatherResult:
        """Fetch current weather for a catalog city.

        The display name always comes from the catalog, never from the
        provider's own (often romanized) city name.
        """
        try:
            raw = await self.client.get_current(city.query_name, self.country)
        except OpenWeatherClientError as e:
            raise ProviderError(f"OpenWeatherMap failed for {city.id}: {e}") from e
        return _extract_weather(raw, city, self.date_format)


def _extract_weather(raw: dict, city: CityEntry, date_format: str) -> WeatherResult:
    """Normalize an OpenWeatherMap /weather body into a WeatherResult."""
    try:
        condition = raw["weather"][0]
        main = raw["main"]
        return WeatherResult(
            city_display_name=city.display_name,
            temperature_celsius=round_half_up(float(main["temp"])),
            condition_text=str(condition.get("description", "")),
            condition_code=int(condition["id"]),
            humidity_percent=int(main["humidity"]),
            wind_speed_mps=float(raw["wind"]["speed"]),
            observed_date=format_observed_date(date_format=date_format),
        )
    except (KeyError, IndexError, TypeError, ValueError) as e:
        logger.warning("Malformed OpenWeatherMap body for %s: %r", city.id, e)
        raise ProviderError(f"Malformed response for {city.id}: {e!r}") from e


def round_half_up(value: float) -> int:
    """Round to nearest integer with .5 going up (-2.5 -> -2)."""
    return math.floor(value + 0.5)
