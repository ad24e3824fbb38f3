"""Process-wide settings store lifecycle management."""

import structlog

from app.core.config import settings
from app.core.redis import get_redis
from app.repositories.settings_store import (
    InMemorySettingsStore,
    RedisSettingsStore,
    SettingsStore,
)

logger = structlog.get_logger()

settings_store: SettingsStore | None = None


async def init_settings_store() -> SettingsStore:
    """Create the settings store for the configured backend.

    The redis backend expects ``init_redis()`` to have run first.
    """
    global settings_store  # noqa: PLW0603
    if settings.store.is_persistent:
        store = RedisSettingsStore(
            get_redis(),
            default_port=settings.server.port,
            base_url=settings.server.base_url,
            key=settings.store.redis_key,
        )
        await store.load()
        settings_store = store
    else:
        settings_store = InMemorySettingsStore(
            default_port=settings.server.port,
            base_url=settings.server.base_url,
        )
    logger.info("Settings store initialized", backend=settings.store.backend)
    return settings_store


def close_settings_store() -> None:
    """Drop the settings store."""
    global settings_store  # noqa: PLW0603
    settings_store = None


def get_settings_store() -> SettingsStore:
    """Get the active settings store."""
    if settings_store is None:
        raise RuntimeError("Settings store not initialized")
    return settings_store
