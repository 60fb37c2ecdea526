"""Pydantic v2 configuration schema with strict validation."""

from enum import StrEnum

from pydantic import BaseModel, Field


class ProviderKind(StrEnum):
    SIMULATED = "simulated"
    OPENWEATHERMAP = "openweathermap"


class ProviderConfig(BaseModel):
    model_config = {"extra": "forbid"}

    kind: ProviderKind = ProviderKind.SIMULATED
    base_url: str = "https://api.openweathermap.org/data/2.5"
    country: str = Field(default="JP", min_length=2, max_length=2)
    units: str = "metric"
    lang: str = "ja"
    api_key_env: str = "OPENWEATHER_API_KEY"
    timeout_seconds: float = Field(default=10.0, gt=0.0)


class SimulationConfig(BaseModel):
    model_config = {"extra": "forbid"}

    delay_ms: int = Field(default=800, ge=0)
    seed: int | None = None


class SessionConfig(BaseModel):
    model_config = {"extra": "forbid"}

    auto_fetch: bool = False
    clear_on_select: bool = True


class DisplayConfig(BaseModel):
    model_config = {"extra": "forbid"}

    date_format: str = "%Y/%m/%d"


class AppConfig(BaseModel):
    model_config = {"extra": "forbid"}

    provider: ProviderConfig = ProviderConfig()
    simulation: SimulationConfig = SimulationConfig()
    session: SessionConfig = SessionConfig()
    display: DisplayConfig = DisplayConfig()
    log_level: str = "INFO"
