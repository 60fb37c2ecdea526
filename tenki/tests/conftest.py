"""Shared test fixtures."""

from pathlib import Path

import pytest
import yaml

from tenki.config.schema import AppConfig
from tenki.tests.fakes import FailingProvider, StaticProvider

REPO_ROOT = Path(__file__).resolve().parents[2]


@pytest.fixture
def default_config() -> AppConfig:
    return AppConfig()


@pytest.fixture
def static_provider() -> StaticProvider:
    return StaticProvider()


@pytest.fixture
def failing_provider() -> FailingProvider:
    return FailingProvider()


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "provider": {"kind": "simulated"},
        "simulation": {"delay_ms": 0, "seed": 7},
        "session": {"auto_fetch": False, "clear_on_select": True},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path


@pytest.fixture
def repo_root(monkeypatch) -> Path:
    """Run from the repository root so relative default paths resolve."""
    monkeypatch.chdir(REPO_ROOT)
    return REPO_ROOT
