"""Deployment-time selection of the single active weather provider."""

import logging
import os
import random
from collections.abc import Mapping

from tenki.config.loader import resolve_api_key
from tenki.config.schema import AppConfig, ProviderKind
from tenki.ingest.openweather_client import OpenWeatherClient
from tenki.ingest.providers import WeatherProvider
from tenki.ingest.simulated import SimulatedProvider
from tenki.ingest.weather_fetcher import OpenWeatherProvider

logger = logging.getLogger(__name__)


def build_provider(
    config: AppConfig, environ: Mapping[str, str] | None = None
) -> WeatherProvider:
    """Create the provider for this deployment.

    Raises ConfigError when the HTTP provider is selected without a key.
    """
    if config.provider.kind == ProviderKind.OPENWEATHERMAP:
        if environ is None:
            environ = os.environ
        api_key = resolve_api_key(config, environ)
        client = OpenWeatherClient(
            api_key=api_key,
            base_url=config.provider.base_url,
            units=config.provider.units,
            lang=config.provider.lang,
            timeout=config.provider.timeout_seconds,
        )
        logger.info("Using OpenWeatherMap provider at %s", config.provider.base_url)
        return OpenWeatherProvider(
            client,
            country=config.provider.country,
            date_format=config.display.date_format,
        )

    logger.info(
        "Using simulated provider (delay=%dms seed=%s)",
        config.simulation.delay_ms, config.simulation.seed,
    )
    return SimulatedProvider(
        delay_seconds=config.simulation.delay_ms / 1000,
        rng=random.Random(config.simulation.seed),
        date_format=config.display.date_format,
    )
