"""City catalog, weather result and session state models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CityEntry:
    id: str
    display_name: str  # native script, shown to the user
    query_name: str  # ASCII, sent upstream


@dataclass(frozen=True)
class WeatherResult:
    city_display_name: str
    temperature_celsius: int
    condition_text: str
    condition_code: int
    humidity_percent: int
    wind_speed_mps: float
    observed_date: str


@dataclass
class SessionState:
    selected_city_id: str | None = None
    current_weather: WeatherResult | None = None
    is_loading: bool = False
    error_message: str | None = None
