"""Condition code → icon glyph / background color token.

Codes follow the OpenWeatherMap convention
(https://openweathermap.org/weather-conditions). Bands are checked in
ascending order; anything outside them, including the unused 400s, falls
through to OTHER.
"""

from enum import StrEnum

from tenki.models.weather import SessionState


class WeatherBand(StrEnum):
    THUNDERSTORM = "thunderstorm"
    DRIZZLE = "drizzle"
    RAIN = "rain"
    SNOW = "snow"
    ATMOSPHERE = "atmosphere"  # mist, fog, haze
    CLEAR = "clear"
    CLOUDS = "clouds"
    OTHER = "other"


BAND_ICONS: dict[WeatherBand, str] = {
    WeatherBand.THUNDERSTORM: "⚡",
    WeatherBand.DRIZZLE: "🌧️",
    WeatherBand.RAIN: "🌧️",
    WeatherBand.SNOW: "❄️",
    WeatherBand.ATMOSPHERE: "🌫️",
    WeatherBand.CLEAR: "☀️",
    WeatherBand.CLOUDS: "☁️",
    WeatherBand.OTHER: "🌈",
}

BAND_BACKGROUNDS: dict[WeatherBand, str] = {
    WeatherBand.THUNDERSTORM: "bg-purple-100",
    WeatherBand.DRIZZLE: "bg-blue-100",
    WeatherBand.RAIN: "bg-blue-200",
    WeatherBand.SNOW: "bg-blue-50",
    WeatherBand.ATMOSPHERE: "bg-gray-200",
    WeatherBand.CLEAR: "bg-yellow-100",
    WeatherBand.CLOUDS: "bg-gray-100",
    WeatherBand.OTHER: "bg-indigo-100",
}

SELECT_CITY_GUIDANCE = "上の都市から一つ選択してください。"
PRESS_FETCH_GUIDANCE = "「天気を取得」ボタンをクリックして天気情報を表示します。"


def band_for(code: int) -> WeatherBand:
    if 200 <= code < 300:
        return WeatherBand.THUNDERSTORM
    if 300 <= code < 400:
        return WeatherBand.DRIZZLE
    if 500 <= code < 600:
        return WeatherBand.RAIN
    if 600 <= code < 700:
        return WeatherBand.SNOW
    if 700 <= code < 800:
        return WeatherBand.ATMOSPHERE
    if code == 800:
        return WeatherBand.CLEAR
    if code > 800:
        return WeatherBand.CLOUDS
    return WeatherBand.OTHER


def icon_for(code: int) -> str:
    return BAND_ICONS[band_for(code)]


def background_for(code: int) -> str:
    return BAND_BACKGROUNDS[band_for(code)]


def guidance_for(state: SessionState, auto_fetch: bool = False) -> str | None:
    """Hint text shown when there is nothing else to display."""
    if state.is_loading or state.error_message is not None:
        return None
    if state.selected_city_id is None:
        return SELECT_CITY_GUIDANCE
    if state.current_weather is None and not auto_fetch:
        return PRESS_FETCH_GUIDANCE
    return None
