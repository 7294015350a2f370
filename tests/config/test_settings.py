from __future__ import annotations

from pathlib import Path

import pytest

from holter_analysis.config import DEFAULT_HR_COLUMN, load_settings


def test_load_settings_reads_yaml(tmp_path: Path) -> None:
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    settings_path = config_dir / "settings.yaml"
    settings_path.write_text(
        """
columns:
  timestamp: "Device time"
limits:
  max_input_bytes: 1024
telemetry:
  output_dir: custom_telemetry
        """
    )
    settings = load_settings(settings_path)
    assert settings.timestamp_column == "Device time"
    assert settings.hr_column == DEFAULT_HR_COLUMN
    assert settings.max_input_bytes == 1024
    assert settings.telemetry_output_dir == Path("custom_telemetry")


def test_missing_file_uses_defaults(tmp_path: Path) -> None:
    settings = load_settings(tmp_path / "absent.yaml")
    assert settings.hrv_column == "HRV [ms]"
    assert settings.time_format == "%X"


def test_env_override(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("HOLTER_LIMITS__MAX_INPUT_BYTES", "2048")
    monkeypatch.setenv("HOLTER_TELEMETRY__OUTPUT_DIR", "env_telemetry")
    settings = load_settings(tmp_path / "absent.yaml")
    assert settings.max_input_bytes == 2048
    assert settings.telemetry_output_dir == Path("env_telemetry")


@pytest.mark.parametrize("limit", ["0", "-5", "lots"])
def test_invalid_size_limit_is_rejected(tmp_path: Path, monkeypatch, limit: str) -> None:
    monkeypatch.setenv("HOLTER_LIMITS__MAX_INPUT_BYTES", limit)
    with pytest.raises(ValueError, match="max_input_bytes"):
        load_settings(tmp_path / "absent.yaml")


def test_colliding_column_names_are_rejected(tmp_path: Path) -> None:
    settings_path = tmp_path / "settings.yaml"
    settings_path.write_text('columns:\n  hr: "HRV [ms]"\n')
    with pytest.raises(ValueError, match="must differ"):
        load_settings(settings_path)
