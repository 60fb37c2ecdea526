"""Fetch controller: the only mutator of a widget session's state."""

import asyncio
import logging
from collections.abc import Callable
from dataclasses import replace

from tenki.config.defaults import find_city
from tenki.config.schema import AppConfig
from tenki.ingest.providers import WeatherProvider
from tenki.models.weather import SessionState, WeatherResult

logger = logging.getLogger(__name__)

CITY_NOT_FOUND_MESSAGE = "都市が見つかりません"
FETCH_FAILED_MESSAGE = "天気情報の取得に失敗しました。後でもう一度お試しください。"

StateListener = Callable[[SessionState], None]


class FetchController:
    """Owns one SessionState and exposes select_city / fetch_weather.

    Overlapping fetches are sequenced: each call takes a token and only the
    newest call may write its outcome or clear the loading flag. Selecting a
    different city also supersedes any call in flight. Calls are never
    cancelled.
    """

    def __init__(
        self,
        provider: WeatherProvider,
        auto_fetch: bool = False,
        clear_on_select: bool = True,
    ):
        self.provider = provider
        self.auto_fetch = auto_fetch
        self.clear_on_select = clear_on_select
        self._state = SessionState()
        self._listeners: list[StateListener] = []
        self._fetch_seq = 0

    @classmethod
    def from_config(cls, config: AppConfig, provider: WeatherProvider) -> "FetchController":
        return cls(
            provider,
            auto_fetch=config.session.auto_fetch,
            clear_on_select=config.session.clear_on_select,
        )

    @property
    def state(self) -> SessionState:
        """A snapshot; mutating it does not affect the session."""
        return replace(self._state)

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Call ``listener`` with a snapshot after every transition.

        Returns a function that removes the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self.state)

    def select_city(self, city_id: str) -> asyncio.Task | None:
        """Change the selected city.

        With auto_fetch, a fetch is dispatched once per distinct selected
        value and its task is returned. Requires a running event loop in
        that mode.
        """
        city = find_city(city_id)
        if city is None:
            logger.warning("Selection rejected, unknown city id %r", city_id)
            self._state.error_message = CITY_NOT_FOUND_MESSAGE
            self._state.is_loading = False
            self._notify()
            return None

        changed = city.id != self._state.selected_city_id
        self._state.selected_city_id = city.id
        if changed:
            # any fetch still in flight belongs to the previous city
            self._fetch_seq += 1
            self._state.is_loading = False
        if self.clear_on_select:
            self._state.current_weather = None
        logger.info("Selected %s (%s)", city.id, city.display_name)
        self._notify()

        if self.auto_fetch and changed:
            return asyncio.get_running_loop().create_task(self.fetch_weather())
        return None

    async def fetch_weather(self) -> WeatherResult | None:
        """Fetch weather for the selected city.

        Returns the stored result, or None when nothing was selected, the
        fetch failed, or a newer fetch superseded this one.
        """
        city_id = self._state.selected_city_id
        if city_id is None:
            return None

        self._fetch_seq += 1
        seq = self._fetch_seq
        self._state.is_loading = True
        self._state.error_message = None
        self._notify()

        city = find_city(city_id)
        if city is None:
            self._state.error_message = CITY_NOT_FOUND_MESSAGE
            self._state.is_loading = False
            self._notify()
            return None

        stored: WeatherResult | None = None
        try:
            result = await self.provider.get_weather(city)
        except Exception:
            logger.exception("Error fetching weather data for %s", city.id)
            if seq == self._fetch_seq:
                self._state.error_message = FETCH_FAILED_MESSAGE
        else:
            if seq == self._fetch_seq:
                stored = replace(result, city_display_name=city.display_name)
                self._state.current_weather = stored
                logger.info(
                    "Weather for %s: %d°C code=%d",
                    city.id, stored.temperature_celsius, stored.condition_code,
                )
        finally:
            if seq == self._fetch_seq:
                self._state.is_loading = False
                self._notify()
            else:
                logger.debug(
                    "Discarding stale fetch #%d for %s (latest #%d)",
                    seq, city.id, self._fetch_seq,
                )
        return stored
