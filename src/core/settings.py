"""Settings loading and validation.

This module provides a minimal, type-safe configuration loader for the project.

Design principles:
- Fail-fast: invalid fields raise a readable error that includes field path
- No side effects: this module only parses/validates configuration
- Every section is optional; missing values fall back to the defaults below
"""

from __future__ import annotations

import codecs
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

import yaml

DEFAULT_PROPERTIES_ENCODING = "iso-8859-1"
DEFAULT_LOG_LEVEL = "INFO"
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class SettingsError(ValueError):
    """Raised when settings are missing or invalid."""


@dataclass(frozen=True)
class LoaderSettings:
    properties_encoding: str = DEFAULT_PROPERTIES_ENCODING
    expand_lists: bool = True


@dataclass(frozen=True)
class ObservabilitySettings:
    log_level: str = DEFAULT_LOG_LEVEL


@dataclass(frozen=True)
class Settings:
    loader: LoaderSettings = field(default_factory=LoaderSettings)
    observability: ObservabilitySettings = field(default_factory=ObservabilitySettings)


def _optional_section(raw: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    value = raw.get(key)
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise SettingsError(f"Invalid section type: {key}")
    return value


def _as_str(value: Any, path: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise SettingsError(f"Invalid value for {path}: expected non-empty string")
    return value


def _as_bool(value: Any, path: str) -> bool:
    if not isinstance(value, bool):
        raise SettingsError(f"Invalid value for {path}: expected bool")
    return value


def _as_encoding(value: Any, path: str) -> str:
    name = _as_str(value, path).strip()
    try:
        return codecs.lookup(name).name
    except LookupError as e:
        raise SettingsError(f"Invalid value for {path}: unknown encoding '{name}'") from e


def _as_log_level(value: Any, path: str) -> str:
    level = _as_str(value, path).strip().upper()
    if level not in _LOG_LEVELS:
        raise SettingsError(
            f"Invalid value for {path}: expected one of {', '.join(_LOG_LEVELS)}"
        )
    return level


def parse_settings(raw: Mapping[str, Any] | None) -> Settings:
    """Build validated settings from an already parsed mapping."""

    if raw is None:
        return Settings()
    if not isinstance(raw, Mapping):
        raise SettingsError("Invalid settings root: expected mapping")

    loader_raw = _optional_section(raw, "loader")
    observability_raw = _optional_section(raw, "observability")

    loader = LoaderSettings(
        properties_encoding=_as_encoding(
            loader_raw.get("properties_encoding", DEFAULT_PROPERTIES_ENCODING),
            "loader.properties_encoding",
        ),
        expand_lists=_as_bool(loader_raw.get("expand_lists", True), "loader.expand_lists"),
    )

    observability = ObservabilitySettings(
        log_level=_as_log_level(
            observability_raw.get("log_level", DEFAULT_LOG_LEVEL),
            "observability.log_level",
        ),
    )

    return Settings(loader=loader, observability=observability)


def load_settings(path: str | Path) -> Settings:
    """Load settings from a YAML file."""

    settings_path = Path(path)
    if not settings_path.exists():
        raise SettingsError(f"Settings file not found: {settings_path}")

    try:
        raw_obj = yaml.safe_load(settings_path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise SettingsError(f"Invalid YAML in settings file: {settings_path}") from e

    if raw_obj is not None and not isinstance(raw_obj, Mapping):
        raise SettingsError(f"Invalid settings root: expected mapping in {settings_path}")

    return parse_settings(raw_obj)
