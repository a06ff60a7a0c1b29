"""
Environment-backed settings.

Every value is read on call, so tests can tweak the environment with
monkeypatch without reloading modules.
"""

from __future__ import annotations

import os

DEFAULT_CORS_ORIGINS = "*"
DEFAULT_LOG_LEVEL = "INFO"


def _env_str(name: str, default: str) -> str:
    return os.environ.get(name, default).strip() or default


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name, "").strip().lower()
    if not raw:
        return default
    if raw in {"1", "true", "yes", "on"}:
        return True
    if raw in {"0", "false", "no", "off"}:
        return False
    return default


def db_pool_min_size() -> int:
    return max(1, _env_int("DB_POOL_MIN_SIZE", 1))


def db_pool_max_size() -> int:
    return max(db_pool_min_size(), _env_int("DB_POOL_MAX_SIZE", 5))


def db_command_timeout_s() -> int:
    return _env_int("DB_COMMAND_TIMEOUT_S", 30)


def run_migrations() -> bool:
    return _env_bool("RUN_MIGRATIONS", True)


def cors_allow_origins() -> list[str]:
    raw = _env_str("CORS_ALLOW_ORIGINS", DEFAULT_CORS_ORIGINS)
    origins = [origin.strip() for origin in raw.split(",")]
    return [origin for origin in origins if origin] or [DEFAULT_CORS_ORIGINS]


def log_level() -> str:
    return _env_str("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
