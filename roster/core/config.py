"""
Configuration helpers for the roster backend.

Every tunable (database connection, listen address, log level) is read from
environment variables here so that routers/services do not fetch os.environ
directly.
"""

from dataclasses import dataclass
from functools import lru_cache
import os


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    database_url: str
    database_username: str
    database_password: str
    host: str
    port: int
    log_level: str
    create_tables: bool


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _bool(value: str | None, default: bool = False) -> bool:
        if value is None:
            return default
        return value.strip().lower() in {"1", "true", "yes", "on"}

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        database_url=os.getenv("DATABASE_URL", "").strip(),
        database_username=os.getenv("DATABASE_USERNAME", ""),
        database_password=os.getenv("DATABASE_PASSWORD", ""),
        host=os.getenv("HOST", "0.0.0.0"),
        port=_int(os.getenv("PORT", "8080"), 8080),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        create_tables=_bool(os.getenv("CREATE_TABLES"), True),
    )
