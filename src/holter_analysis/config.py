"""Configuration loader handling YAML settings with environment overrides."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict

import yaml

SETTINGS_PATH = Path("config/settings.yaml")
ENV_PREFIX = "HOLTER_"

DEFAULT_TIMESTAMP_COLUMN = "Phone timestamp"
DEFAULT_HR_COLUMN = "HR [bpm]"
DEFAULT_HRV_COLUMN = "HRV [ms]"
DEFAULT_TIME_FORMAT = "%X"
DEFAULT_MAX_INPUT_BYTES = 50 * 1024 * 1024


@dataclass
class Settings:
    raw: Dict[str, Any] = field(default_factory=dict)

    def get(self, *keys: str, default: Any = None) -> Any:
        cursor: Any = self.raw
        for key in keys:
            if isinstance(cursor, dict) and key in cursor:
                cursor = cursor[key]
            else:
                return default
        return cursor

    @property
    def timestamp_column(self) -> str:
        return str(self.get("columns", "timestamp", default=DEFAULT_TIMESTAMP_COLUMN))

    @property
    def hr_column(self) -> str:
        return str(self.get("columns", "hr", default=DEFAULT_HR_COLUMN))

    @property
    def hrv_column(self) -> str:
        return str(self.get("columns", "hrv", default=DEFAULT_HRV_COLUMN))

    @property
    def time_format(self) -> str:
        return str(self.get("parsing", "time_format", default=DEFAULT_TIME_FORMAT))

    @property
    def max_input_bytes(self) -> int:
        return int(self.get("limits", "max_input_bytes", default=DEFAULT_MAX_INPUT_BYTES))

    @property
    def telemetry_output_dir(self) -> Path:
        return Path(self.get("telemetry", "output_dir", default="analysis_output"))


def _read_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        return {}
    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle) or {}


def _apply_env_overrides(settings: Dict[str, Any]) -> Dict[str, Any]:
    overrides: Dict[str, Any] = {}
    for key, value in os.environ.items():
        if not key.startswith(ENV_PREFIX):
            continue
        path = key[len(ENV_PREFIX) :].lower().split("__")
        cursor = overrides
        for segment in path[:-1]:
            cursor = cursor.setdefault(segment, {})
        cursor[path[-1]] = value

    def merge(base: Dict[str, Any], patch: Dict[str, Any]) -> Dict[str, Any]:
        for key, value in patch.items():
            if isinstance(value, dict):
                existing = base.get(key)
                base[key] = merge(existing if isinstance(existing, dict) else {}, value)
            else:
                base[key] = _coerce(value)
        return base

    return merge(settings, overrides)


def _coerce(value: str) -> Any:
    lowered = value.lower()
    if lowered in {"true", "false"}:
        return lowered == "true"
    try:
        return int(value)
    except ValueError:
        pass
    try:
        return float(value)
    except ValueError:
        pass
    return value


def validate_settings(settings: Settings) -> Settings:
    """Raise if a setting would make every export unreadable."""
    limit = settings.get("limits", "max_input_bytes", default=DEFAULT_MAX_INPUT_BYTES)
    if isinstance(limit, bool) or not isinstance(limit, int) or limit <= 0:
        raise ValueError(f"limits.max_input_bytes must be a positive integer, got {limit!r}")

    columns = [settings.timestamp_column, settings.hr_column, settings.hrv_column]
    if any(not column.strip() for column in columns):
        raise ValueError(f"Column names must be non-empty, got {columns}")
    if len({column.strip() for column in columns}) != len(columns):
        raise ValueError(f"Timestamp, HR and HRV columns must differ, got {columns}")
    return settings


def load_settings(path: Path | None = None) -> Settings:
    settings_path = path or SETTINGS_PATH
    raw = _read_yaml(settings_path)
    raw = _apply_env_overrides(raw)
    return validate_settings(Settings(raw=raw))
