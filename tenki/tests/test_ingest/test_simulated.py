"""Tests for the simulated provider and provider selection."""

import random
from datetime import date

import pytest

from tenki.config.defaults import CITY_CATALOG, find_city
from tenki.config.loader import ConfigError
from tenki.config.schema import AppConfig, ProviderConfig, ProviderKind, SimulationConfig
from tenki.ingest.factory import build_provider
from tenki.ingest.simulated import CONDITION_PALETTE, SimulatedProvider
from tenki.ingest.weather_fetcher import OpenWeatherProvider
from tenki.models.common import format_observed_date


class TestSimulatedProvider:
    @pytest.mark.asyncio
    async def test_values_within_ranges(self):
        provider = SimulatedProvider(delay_seconds=0, rng=random.Random(1))
        codes = {code for code, _ in CONDITION_PALETTE}
        for city in CITY_CATALOG:
            for _ in range(20):
                w = await provider.get_weather(city)
                assert w.city_display_name == city.display_name
                assert w.condition_code in codes
                assert dict(CONDITION_PALETTE)[w.condition_code] == w.condition_text
                assert -5 <= w.temperature_celsius <= 30
                assert 0 <= w.humidity_percent < 100
                assert 0 <= w.wind_speed_mps < 20

    @pytest.mark.asyncio
    async def test_seeded_is_reproducible(self):
        city = find_city("kobe")
        a = SimulatedProvider(delay_seconds=0, rng=random.Random(42))
        b = SimulatedProvider(delay_seconds=0, rng=random.Random(42))
        assert await a.get_weather(city) == await b.get_weather(city)

    @pytest.mark.asyncio
    async def test_observed_date_is_today(self):
        provider = SimulatedProvider(delay_seconds=0, date_format="%Y-%m-%d")
        w = await provider.get_weather(find_city("tokyo"))
        assert w.observed_date == date.today().isoformat()

    @pytest.mark.asyncio
    async def test_delay_is_awaited(self, monkeypatch):
        slept: list[float] = []

        async def fake_sleep(seconds: float) -> None:
            slept.append(seconds)

        monkeypatch.setattr("tenki.ingest.simulated.asyncio.sleep", fake_sleep)
        provider = SimulatedProvider(delay_seconds=0.8)
        await provider.get_weather(find_city("sapporo"))
        assert slept == [0.8]


class TestFormatObservedDate:
    def test_default_shape(self):
        assert format_observed_date(date(2026, 1, 5)) == "2026/01/05"

    def test_custom_format(self):
        assert format_observed_date(date(2026, 1, 5), "%d.%m.%Y") == "05.01.2026"


class TestBuildProvider:
    def test_default_is_simulated(self, default_config: AppConfig):
        provider = build_provider(default_config, environ={})
        assert isinstance(provider, SimulatedProvider)
        assert provider.delay_seconds == 0.8

    def test_simulation_settings_applied(self):
        config = AppConfig(simulation=SimulationConfig(delay_ms=0, seed=3))
        provider = build_provider(config, environ={})
        assert provider.delay_seconds == 0

    def test_openweathermap_with_key(self):
        config = AppConfig(provider=ProviderConfig(kind=ProviderKind.OPENWEATHERMAP))
        provider = build_provider(config, environ={"OPENWEATHER_API_KEY": "abc"})
        assert isinstance(provider, OpenWeatherProvider)
        assert provider.client.api_key == "abc"
        assert provider.country == "JP"

    def test_openweathermap_without_key(self):
        config = AppConfig(provider=ProviderConfig(kind=ProviderKind.OPENWEATHERMAP))
        with pytest.raises(ConfigError):
            build_provider(config, environ={})

    def test_custom_key_variable(self):
        config = AppConfig(
            provider=ProviderConfig(kind=ProviderKind.OPENWEATHERMAP, api_key_env="OWM_KEY")
        )
        provider = build_provider(config, environ={"OWM_KEY": "xyz"})
        assert provider.client.api_key == "xyz"
