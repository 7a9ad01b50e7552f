"""
Configuration loaded from environment variables.

- LEDGERCHESS_DATABASE_URL: SQLAlchemy URL of the ledger database.
- LEDGERCHESS_SQL_ECHO: log every SQL statement ("1", "true", "yes", "on").
- LEDGERCHESS_LOG_LEVEL: root log level name.
"""

import os
from dataclasses import dataclass
from typing import Any, Callable

DEFAULT_DATABASE_URL = "sqlite:///./ledgerchess.db"


def _as_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _get(name: str, default: Any, cast: Callable[[str], Any] | None = None) -> Any:
    value = os.environ.get(name)
    if value is None:
        return default
    return cast(value) if cast else value


@dataclass(frozen=True)
class Settings:
    database_url: str = DEFAULT_DATABASE_URL
    sql_echo: bool = False
    log_level: str = "INFO"


def load_settings() -> Settings:
    """Read the settings from the current environment (call again after changing it)."""
    return Settings(
        database_url=_get("LEDGERCHESS_DATABASE_URL", DEFAULT_DATABASE_URL),
        sql_echo=_get("LEDGERCHESS_SQL_ECHO", False, cast=_as_bool),
        log_level=_get("LEDGERCHESS_LOG_LEVEL", "INFO").upper(),
    )
