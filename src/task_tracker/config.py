# src/task_tracker/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- The store location is a plain value handed to TaskStore, never a global.
- Optional local overrides from an untracked config_local.py.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASK_TRACKER"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_to_file: bool

    # ---- Local data paths ----
    data_dir: Path
    tasks_file: Path

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "task-tracker").strip() or "task-tracker"
        log_level = _env(_k("LOG_LEVEL"), "WARNING").strip().upper() or "WARNING"
        log_to_file = _env_bool(_k("LOG_TO_FILE"), True)

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/task_tracker"))
        tasks_file = _env_path(_k("TASKS_FILE"), Path("tasks.json"))

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_to_file=log_to_file,
            data_dir=data_dir,
            tasks_file=tasks_file,
        )


def _apply_local_overrides(settings: Settings) -> Settings:
    """Apply config_local.py overrides (never committed). Keep it explicit."""
    try:
        import config_local as _config_local  # type: ignore
    except ImportError:
        return settings

    if hasattr(_config_local, "TASKS_FILE"):
        settings = replace(settings, tasks_file=Path(_config_local.TASKS_FILE).expanduser())
    if hasattr(_config_local, "LOG_LEVEL"):
        settings = replace(settings, log_level=str(_config_local.LOG_LEVEL).upper())
    return settings


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    """Build settings once (reading .env first) and return the cached instance."""
    global _SETTINGS
    if _SETTINGS is None:
        load_dotenv(override=False)
        _SETTINGS = _apply_local_overrides(Settings.from_env())
    return _SETTINGS
