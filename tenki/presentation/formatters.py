"""Output formatters for the weather panel and session state."""

import json
from dataclasses import asdict

from tenki.config.defaults import CITY_CATALOG
from tenki.models.weather import SessionState, WeatherResult
from tenki.presentation.mapper import background_for, guidance_for, icon_for

FETCH_BUTTON_LABEL = "天気を取得"
LOADING_LABEL = "読込中..."


def format_weather_text(w: WeatherResult) -> str:
    """Plain text panel for terminals."""
    lines = [
        f"=== {w.city_display_name} | {w.observed_date} ===",
        f"{icon_for(w.condition_code)}  {w.temperature_celsius}°C  {w.condition_text}",
        f"湿度: {w.humidity_percent}% | 風速: {w.wind_speed_mps:g} m/s",
    ]
    return "\n".join(lines)


def weather_to_dict(w: WeatherResult) -> dict:
    data = asdict(w)
    data["icon"] = icon_for(w.condition_code)
    data["background"] = background_for(w.condition_code)
    return data


def state_to_dict(state: SessionState, auto_fetch: bool = False) -> dict:
    """Everything a view needs to render the widget from one state value."""
    return {
        "selected_city_id": state.selected_city_id,
        "weather": (
            weather_to_dict(state.current_weather)
            if state.current_weather is not None
            else None
        ),
        "is_loading": state.is_loading,
        "error_message": state.error_message,
        "guidance": guidance_for(state, auto_fetch),
        "button_label": LOADING_LABEL if state.is_loading else FETCH_BUTTON_LABEL,
        "can_fetch": state.selected_city_id is not None and not state.is_loading,
        "auto_fetch": auto_fetch,
    }


def format_state_json(state: SessionState, auto_fetch: bool = False) -> str:
    return json.dumps(state_to_dict(state, auto_fetch), ensure_ascii=False, indent=2)


def format_catalog_text() -> str:
    return "\n".join(
        f"{c.id:<10} {c.display_name}\t({c.query_name})" for c in CITY_CATALOG
    )
