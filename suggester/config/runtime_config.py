"""Runtime configuration helpers for the suggester."""
from __future__ import annotations

import os
from typing import Optional

DEFAULT_SEARCH_ANALYTICS_CAPACITY = 1000
DEFAULT_SEARCH_ANALYTICS_WINDOW_HOURS = 24
DEFAULT_LOG_LEVEL = "INFO"


def _get_env(name: str, default: Optional[str] = None) -> Optional[str]:
    return os.getenv(name, default)


def _truthy_env(var: str) -> bool:
    value = _get_env(var)
    if not value:
        return False
    return value.strip().lower() in {"1", "true", "yes"}


def _int_env(name: str, default: int) -> int:
    raw = _get_env(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value > 0 else default


def get_env() -> str:
    value = _get_env("ENV") or _get_env("APP_ENV")
    return value.lower() if value else "dev"


def get_search_analytics_backend() -> str:
    return (_get_env("SEARCH_ANALYTICS_BACKEND") or "memory").lower()


def get_search_analytics_capacity() -> int:
    return _int_env("SEARCH_ANALYTICS_CAPACITY", DEFAULT_SEARCH_ANALYTICS_CAPACITY)


def get_search_analytics_window_hours() -> int:
    return _int_env("SEARCH_ANALYTICS_WINDOW_HOURS", DEFAULT_SEARCH_ANALYTICS_WINDOW_HOURS)


def search_analytics_seed_demo_enabled() -> bool:
    return _truthy_env("SEARCH_ANALYTICS_SEED_DEMO")


def get_firestore_project() -> Optional[str]:
    return _get_env("GCP_PROJECT_ID") or _get_env("GCP_PROJECT")


def get_log_level() -> str:
    return (_get_env("LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()
