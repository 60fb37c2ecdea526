"""Tests for CLI commands."""

import json
from pathlib import Path

from tenki.cli import main


def _write_config(tmp_path: Path, body: str = "simulation:\n  delay_ms: 0\n  seed: 1\n") -> str:
    path = tmp_path / "test.yaml"
    path.write_text(body)
    return str(path)


class TestCLI:
    def test_no_command_returns_1(self, capsys):
        result = main([])
        assert result == 1

    def test_cities(self, repo_root, capsys):
        result = main(["cities"])
        assert result == 0
        captured = capsys.readouterr()
        assert "tokyo" in captured.out
        assert "東京" in captured.out
        assert len(captured.out.strip().splitlines()) == 11

    def test_fetch_simulated(self, tmp_path: Path, capsys):
        config_path = _write_config(tmp_path)
        result = main(["--config", config_path, "fetch", "tokyo"])
        assert result == 0
        captured = capsys.readouterr()
        assert "東京" in captured.out
        assert "°C" in captured.out

    def test_fetch_json(self, tmp_path: Path, capsys):
        config_path = _write_config(tmp_path)
        result = main(["--config", config_path, "fetch", "kyoto", "--json"])
        assert result == 0
        data = json.loads(capsys.readouterr().out)
        assert data["selected_city_id"] == "kyoto"
        assert data["weather"]["city_display_name"] == "京都"
        assert data["is_loading"] is False

    def test_fetch_unknown_city(self, tmp_path: Path, capsys):
        config_path = _write_config(tmp_path)
        result = main(["--config", config_path, "fetch", "london"])
        assert result == 1
        assert "都市が見つかりません" in capsys.readouterr().out

    def test_fetch_without_api_key(self, tmp_path: Path, capsys, monkeypatch):
        monkeypatch.delenv("OPENWEATHER_API_KEY", raising=False)
        config_path = _write_config(tmp_path, "provider:\n  kind: openweathermap\n")
        result = main(["--config", config_path, "fetch", "tokyo"])
        assert result == 1
        assert "OPENWEATHER_API_KEY" in capsys.readouterr().out

    def test_simulate_flag_overrides_provider(self, tmp_path: Path, capsys, monkeypatch):
        monkeypatch.delenv("OPENWEATHER_API_KEY", raising=False)
        config_path = _write_config(
            tmp_path,
            "provider:\n  kind: openweathermap\nsimulation:\n  delay_ms: 0\n",
        )
        result = main(["--config", config_path, "--simulate", "fetch", "osaka"])
        assert result == 0
        assert "大阪" in capsys.readouterr().out

    def test_missing_config_file(self, tmp_path: Path, capsys):
        result = main(["--config", str(tmp_path / "missing.yaml"), "cities"])
        assert result == 1
        assert "not found" in capsys.readouterr().out

    def test_config_show(self, repo_root, capsys):
        result = main(["config", "show"])
        assert result == 0
        captured = capsys.readouterr()
        assert "simulated" in captured.out

    def test_config_set(self, repo_root, capsys):
        result = main(["config", "set", "session.auto_fetch=true"])
        assert result == 0
        assert "True" in capsys.readouterr().out

    def test_config_set_bad_format(self, repo_root, capsys):
        result = main(["config", "set", "session.auto_fetch"])
        assert result == 1

    def test_default_config_file_loaded(self, tmp_path: Path, capsys, monkeypatch):
        configs = tmp_path / "ops" / "configs"
        configs.mkdir(parents=True)
        (configs / "default.yaml").write_text("simulation:\n  delay_ms: 5\n")
        monkeypatch.chdir(tmp_path)
        result = main(["config", "show"])
        assert result == 0
        data = json.loads(capsys.readouterr().out)
        assert data["simulation"]["delay_ms"] == 5

    def test_default_config_file_missing(self, tmp_path: Path, capsys, monkeypatch):
        monkeypatch.chdir(tmp_path)
        result = main(["config", "show"])
        assert result == 1
        assert "default.yaml" in capsys.readouterr().out
