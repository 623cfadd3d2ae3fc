"""Settings storage for application configuration."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from loguru import logger


SETTINGS_PATH = Path(
    os.environ.get(
        "LUNITOOL_SETTINGS_PATH",
        Path.home() / ".config" / "lunitool" / "settings.json",
    )
)
CONFIG_DIR = SETTINGS_PATH.parent

DEFAULT_LANGUAGE = "de"
DEFAULT_KEYBOARD = "de"
DEFAULT_BACKTITLE = "LUNITOOL"
DEFAULT_THEME = "terminal_spirit"

DEFAULT_SETTINGS: dict[str, Any] = {
    "language": DEFAULT_LANGUAGE,
    "keyboard": DEFAULT_KEYBOARD,
    "debug_mode": False,
    "log_dir": None,
    "backtitle": DEFAULT_BACKTITLE,
    "theme": DEFAULT_THEME,
    "auto_install_dialog": True,
    "task_modules": {},
}

# Environment variables that seed session defaults over stored values.
ENV_OVERRIDES = {
    "language": "LUNITOOL_LANG",
    "keyboard": "LUNITOOL_KEYBOARD",
}


@dataclass
class SettingsStore:
    values: dict[str, Any] = field(default_factory=dict)


settings_store = SettingsStore()


def load_settings(path: Path | None = None) -> None:
    path = path or SETTINGS_PATH
    settings_store.values = dict(DEFAULT_SETTINGS)
    if path.exists():
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as error:
            logger.warning(f"Ignoring unreadable settings file {path}: {error}")
            data = None
        if isinstance(data, dict):
            settings_store.values.update(data)
    for key, variable in ENV_OVERRIDES.items():
        value = os.environ.get(variable)
        if value:
            settings_store.values[key] = value


def save_settings(path: Path | None = None) -> None:
    path = path or SETTINGS_PATH
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            json.dumps(settings_store.values, indent=2, sort_keys=True),
            encoding="utf-8",
        )
    except OSError as error:
        # Read-only live media: keep running with in-memory settings.
        logger.warning(f"Could not save settings to {path}: {error}")


def get_setting(key: str, default: Any | None = None) -> Any:
    return settings_store.values.get(key, default)


def set_setting(key: str, value: Any) -> None:
    settings_store.values[key] = value
    save_settings()


def get_bool(key: str, default: bool = False) -> bool:
    return bool(get_setting(key, default))


load_settings()
