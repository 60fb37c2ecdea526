"""Simulated provider: random conditions after an artificial latency."""

import asyncio
import logging
import random

from tenki.models.common import DEFAULT_DATE_FORMAT, format_observed_date
from tenki.models.weather import CityEntry, WeatherResult

logger = logging.getLogger(__name__)

# (condition code, description) pairs the simulation draws from
CONDITION_PALETTE: tuple[tuple[int, str], ...] = (
    (800, "快晴"),
    (801, "晴れ"),
    (802, "曇り"),
    (500, "小雨"),
    (501, "雨"),
    (600, "雪"),
    (741, "霧"),
)

TEMPERATURE_RANGE = (-5, 30)  # inclusive
HUMIDITY_UPPER = 100  # exclusive
WIND_SPEED_UPPER = 20  # exclusive


class SimulatedProvider:
    def __init__(
        self,
        delay_seconds: float = 0.8,
        rng: random.Random | None = None,
        date_format: str = DEFAULT_DATE_FORMAT,
    ):
        self.delay_seconds = delay_seconds
        self.rng = rng or random.Random()
        self.date_format = date_format

    async def get_weather(self, city: CityEntry) -> WeatherResult:
        """Synthesize a plausible result; stands in for the network call."""
        if self.delay_seconds > 0:
            await asyncio.sleep(self.delay_seconds)

        code, description = self.rng.choice(CONDITION_PALETTE)
        result = WeatherResult(
            city_display_name=city.display_name,
            temperature_celsius=self.rng.randint(*TEMPERATURE_RANGE),
            condition_text=description,
            condition_code=code,
            humidity_percent=self.rng.randrange(HUMIDITY_UPPER),
            wind_speed_mps=float(self.rng.randrange(WIND_SPEED_UPPER)),
            observed_date=format_observed_date(date_format=self.date_format),
        )
        logger.debug("SIMULATED: %s -> %d %s", city.id, code, description)
        return result
