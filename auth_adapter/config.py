"""Runtime configuration sourced from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Tuple

from dotenv import load_dotenv

load_dotenv()

DEFAULT_PORT = 4000


def _normalize_bool(value: str | None, default: bool = False) -> bool:
    """Return normalized boolean from environment-style value."""
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"", "0", "false", "no", "off"}:
        return False
    if normalized in {"1", "true", "yes", "on"}:
        return True
    return default


def _split_csv(value: str | None) -> Tuple[str, ...]:
    if not value:
        return ("*",)
    items = tuple(part.strip() for part in value.split(",") if part.strip())
    return items or ("*",)


@dataclass(frozen=True)
class Settings:
    log_level: str
    host: str
    port: int
    cors_origins: Tuple[str, ...]
    sql_echo: bool


@lru_cache(maxsize=None)
def get_settings() -> Settings:
    """Return the cached settings for this process."""
    raw_port = os.getenv("PORT", str(DEFAULT_PORT))
    try:
        port = int(raw_port)
    except ValueError:
        raise ValueError(f"PORT must be an integer, got {raw_port!r}")
    return Settings(
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        host=os.getenv("HOST", "0.0.0.0"),
        port=port,
        cors_origins=_split_csv(os.getenv("CORS_ORIGINS")),
        sql_echo=_normalize_bool(os.getenv("SQL_ECHO")),
    )


def refresh_settings_cache() -> None:
    """Invalidate cached settings (useful for tests)."""
    get_settings.cache_clear()
