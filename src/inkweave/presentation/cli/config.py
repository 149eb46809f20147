"""CLI configuration helpers for options persistence."""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Dict

_DEFAULT_TEXT_MODE = "instant"
_DEFAULT_LOG_LEVEL = "WARNING"

CliConfig = Dict[str, object]


def get_user_data_dir() -> Path:
    """Return the per-user data directory."""
    if os.name == "nt":
        base = os.environ.get("APPDATA")
        if base:
            return Path(base) / "Inkweave"
        return Path.home() / "Inkweave"
    return Path.home() / ".config" / "inkweave"


def get_default_config_path() -> Path:
    """Return the default per-user config path."""
    return get_user_data_dir() / "config.json"


def default_config() -> CliConfig:
    return {
        "text_display_mode": _DEFAULT_TEXT_MODE,
        "show_tags": False,
        "log_level": _DEFAULT_LOG_LEVEL,
    }


def _normalize_text_mode(value: object) -> str:
    return "step" if value == "step" else _DEFAULT_TEXT_MODE


def _normalize_log_level(value: object) -> str:
    if isinstance(value, str) and value.upper() in {"DEBUG", "INFO", "WARNING", "ERROR"}:
        return value.upper()
    return _DEFAULT_LOG_LEVEL


def _normalize(raw: Dict[str, object]) -> CliConfig:
    return {
        "text_display_mode": _normalize_text_mode(raw.get("text_display_mode")),
        "show_tags": raw.get("show_tags") is True,
        "log_level": _normalize_log_level(raw.get("log_level")),
    }


def load_config(path: Path | None = None) -> CliConfig:
    """Load config from disk or return defaults."""
    config_path = path or get_default_config_path()
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return default_config()
    if not isinstance(raw, dict):
        return default_config()
    return _normalize(raw)


def save_config(config: CliConfig, path: Path | None = None) -> None:
    """Persist config to disk."""
    config_path = path or get_default_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    payload = _normalize(dict(config))
    config_path.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")


def resolve_log_level(config: CliConfig) -> str:
    """Return the log level, letting INKWEAVE_LOG_LEVEL override the config file."""
    override = os.getenv("INKWEAVE_LOG_LEVEL")
    if override:
        return _normalize_log_level(override)
    return _normalize_log_level(config.get("log_level"))
