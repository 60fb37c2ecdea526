"""Weather provider capability shared by the HTTP and simulated backends."""

from typing import Protocol

from tenki.models.weather import CityEntry, WeatherResult


class ProviderError(RuntimeError):
    """Raised when a provider cannot produce a WeatherResult."""


class WeatherProvider(Protocol):
    async def get_weather(self, city: CityEntry) -> WeatherResult: ...
