"""FastAPI dependency injection."""

from __future__ import annotations

from ledlayout.config import Settings, settings
from ledlayout.svg.cache import OutlineCache

_outline_cache = OutlineCache(maxsize=settings.outline_cache_size)


def get_settings() -> Settings:
    return settings


def get_outline_cache() -> OutlineCache:
    return _outline_cache
