# src/taskdeck/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

- One Settings object for the whole app.
- Malformed values fall back to defaults instead of failing at import time.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

ENV_PREFIX = "TASKDECK"

STORE_BACKENDS = ("sqlite", "json", "memory")
THEMES = ("light", "dark")


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _load_dotenv_if_available() -> None:
    """Load .env locally if python-dotenv is installed. Safe no-op otherwise."""
    try:
        from dotenv import load_dotenv
    except ImportError:
        return
    load_dotenv(override=False)


_load_dotenv_if_available()


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_choice(name: str, choices: tuple[str, ...], default: str) -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    v = raw.strip().lower()
    return v if v in choices else default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def _default_store_path(data_dir: Path, backend: str) -> Path:
    if backend == "json":
        return data_dir / "store.json"
    return data_dir / "store.sqlite3"


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Local storage ----
    data_dir: Path
    store_backend: str
    store_path: Path
    tasks_key: str

    # ---- UI ----
    theme: str

    # ---- Remote posts ----
    posts_base_url: str
    posts_timeout_seconds: float

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "taskdeck").strip() or "taskdeck"
        log_level = _env(_k("LOG_LEVEL"), "INFO")

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/taskdeck"))
        store_backend = _env_choice(_k("STORE_BACKEND"), STORE_BACKENDS, "sqlite")
        store_path = _env_path(_k("STORE_PATH"), _default_store_path(data_dir, store_backend))
        tasks_key = _env(_k("TASKS_KEY"), "tasks").strip() or "tasks"

        theme = _env_choice(_k("THEME"), THEMES, "light")

        posts_base_url = (
            _env(_k("POSTS_BASE_URL"), "https://jsonplaceholder.typicode.com").strip()
            or "https://jsonplaceholder.typicode.com"
        )
        posts_timeout_seconds = _env_float(_k("POSTS_TIMEOUT_SECONDS"), 10.0)
        if posts_timeout_seconds <= 0:
            posts_timeout_seconds = 10.0

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            store_backend=store_backend,
            store_path=store_path,
            tasks_key=tasks_key,
            theme=theme,
            posts_base_url=posts_base_url.rstrip("/"),
            posts_timeout_seconds=posts_timeout_seconds,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
