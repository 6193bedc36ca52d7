"""Runtime settings sourced from the environment."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Tuple

DEFAULT_CORS_ORIGINS: Tuple[str, ...] = (
    "http://localhost:5173",
    "http://localhost:3000",
)


@dataclass(frozen=True)
class AppSettings:
    api_prefix: str
    cors_allowed_origins: Tuple[str, ...]
    log_level_name: str

    @property
    def log_level(self) -> int:
        return getattr(logging, self.log_level_name, logging.INFO)


def _normalize_prefix(value: str | None) -> str:
    """Return ``/segment`` form; an empty value mounts routes at the root."""
    if value is None:
        return "/api"
    stripped = value.strip().strip("/")
    return f"/{stripped}" if stripped else ""


def _split_origins(value: str | None) -> Tuple[str, ...]:
    if value is None:
        return DEFAULT_CORS_ORIGINS
    origins = []
    for origin in value.split(","):
        origin = origin.strip().rstrip("/")
        if origin and origin not in origins:
            origins.append(origin)
    return tuple(origins)


@lru_cache(maxsize=None)
def get_settings() -> AppSettings:
    """Return the cached settings state sourced from the environment."""
    return AppSettings(
        api_prefix=_normalize_prefix(os.getenv("API_PREFIX")),
        cors_allowed_origins=_split_origins(os.getenv("CORS_ALLOWED_ORIGINS")),
        log_level_name=os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO",
    )


def refresh_settings_cache() -> None:
    """Invalidate cached settings (useful for tests)."""
    get_settings.cache_clear()
