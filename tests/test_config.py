from pathlib import Path

import pytest

from config import AppConfig


def test_config_resolves_paths(tmp_path: Path) -> None:
    config_path = tmp_path / "config.yaml"
    config_path.write_text("paths:\n  logs: \"logs\"\n", encoding="utf-8")

    config = AppConfig.load(config_path)
    logs_path = config.resolve_path("paths", "logs")

    assert logs_path == config_path.parent / "logs"
    assert config.get("missing", default=123) == 123


def test_config_uses_environment_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    config_path = tmp_path / "harness.yaml"
    config_path.write_text("corruption:\n  exclusion_margins:\n    .cfs: 4\n", encoding="utf-8")
    monkeypatch.setenv("CORRUPTION_HARNESS_CONFIG", str(config_path))

    config = AppConfig.load()

    assert config.get("corruption", "exclusion_margins") == {".cfs": 4}


def test_missing_config_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        AppConfig.load(tmp_path / "absent.yaml")


def test_non_mapping_config_rejected(tmp_path: Path) -> None:
    config_path = tmp_path / "config.yaml"
    config_path.write_text("- just\n- a list\n", encoding="utf-8")

    with pytest.raises(ValueError):
        AppConfig.load(config_path)
