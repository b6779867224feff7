# src/task_tracker/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app (normal "settings layer").
- Nothing is required: every value has a default.
- Bad values fall back to defaults instead of failing at startup.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASKS"

DEFAULT_PENDING_ICON = "○"
DEFAULT_COMPLETED_ICON = "✓"

# Local .env never overrides real environment variables.
load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None or v.strip() == "" else v.strip()


def _env_level(name: str, default: str) -> str:
    raw = _env(name, default).upper()
    if isinstance(logging.getLevelName(raw), int):
        return raw
    return default


def _env_path(name: str) -> Path | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return Path(raw.strip()).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_file: Path | None

    # ---- Listing ----
    pending_icon: str
    completed_icon: str

    @staticmethod
    def from_env() -> "Settings":
        return Settings(
            app_name=_env(_k("APP_NAME"), "task-tracker"),
            log_level=_env_level(_k("LOG_LEVEL"), "WARNING"),
            log_file=_env_path(_k("LOG_FILE")),
            pending_icon=_env(_k("PENDING_ICON"), DEFAULT_PENDING_ICON),
            completed_icon=_env(_k("COMPLETED_ICON"), DEFAULT_COMPLETED_ICON),
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
