"""Settings store: the single owner of the managed server settings."""

import asyncio
from abc import ABC, abstractmethod

import redis.asyncio as redis
import structlog

from app.core.outcome import Err, ErrorKind, Ok, Outcome
from app.schemas.server_settings_schema import ServerSettings
from app.services.settings_validator import validate_base_url, validate_port

logger = structlog.get_logger()

BASE_URL_FIELD = "base_url"
PORT_FIELD = "port"


def _parse_port(raw: str) -> Outcome[int]:
    try:
        return validate_port(int(raw))
    except ValueError:
        return Err(ErrorKind.INVALID_INPUT, f"Port must be an integer, got '{raw}'")


class SettingsStore(ABC):
    """Serialized access to the current base URL and port.

    Values passed to the setters are trusted; validation happens upstream.
    """

    @abstractmethod
    async def get_settings(self) -> ServerSettings:
        """Return a consistent snapshot of both settings."""

    @abstractmethod
    async def get_base_url(self) -> str | None:
        """Return the base URL, or None if it was never set."""

    @abstractmethod
    async def get_port(self) -> int:
        """Return the port (the default if it was never set)."""

    @abstractmethod
    async def set_base_url(self, value: str) -> Outcome[None]:
        """Replace the base URL."""

    @abstractmethod
    async def set_port(self, value: int) -> Outcome[None]:
        """Replace the port."""

    @abstractmethod
    async def set_server_settings(self, base_url: str, port: int) -> Outcome[None]:
        """Replace both settings in one step."""


class InMemorySettingsStore(SettingsStore):
    """Process-local store guarded by a single lock."""

    def __init__(self, default_port: int, base_url: str | None = None) -> None:
        self._settings = ServerSettings(base_url=base_url, port=default_port)
        self._lock = asyncio.Lock()

    async def get_settings(self) -> ServerSettings:
        async with self._lock:
            return self._settings

    async def get_base_url(self) -> str | None:
        async with self._lock:
            return self._settings.base_url

    async def get_port(self) -> int:
        async with self._lock:
            return self._settings.port

    async def set_base_url(self, value: str) -> Outcome[None]:
        return await self._apply({BASE_URL_FIELD: value})

    async def set_port(self, value: int) -> Outcome[None]:
        return await self._apply({PORT_FIELD: value})

    async def set_server_settings(self, base_url: str, port: int) -> Outcome[None]:
        return await self._apply({BASE_URL_FIELD: base_url, PORT_FIELD: port})

    async def _apply(self, changes: dict[str, str | int]) -> Outcome[None]:
        async with self._lock:
            result = await self._persist(changes)
            if isinstance(result, Ok):
                # values were validated upstream; model_copy does not re-check them
                self._settings = self._settings.model_copy(update=changes)
            return result

    async def _persist(self, changes: dict[str, str | int]) -> Outcome[None]:
        """Write changes to the backing store. Called with the lock held."""
        return Ok(None)


class RedisSettingsStore(InMemorySettingsStore):
    """Write-through store persisting settings in a Redis hash.

    Reads are served from the in-memory snapshot, so they never fail. A write
    only reaches the snapshot after Redis accepted it.
    """

    def __init__(
        self,
        redis_client: redis.Redis,  # type: ignore[type-arg]
        default_port: int,
        base_url: str | None = None,
        key: str = "server_settings",
    ) -> None:
        super().__init__(default_port=default_port, base_url=base_url)
        self._redis = redis_client
        self._key = key

    async def load(self) -> ServerSettings:
        """Replace the snapshot with whatever Redis holds for our key."""
        async with self._lock:
            stored = await self._redis.hgetall(self._key)
            changes: dict[str, str | int] = {}
            if stored.get(BASE_URL_FIELD):
                base_url = validate_base_url(stored[BASE_URL_FIELD])
                if isinstance(base_url, Ok):
                    changes[BASE_URL_FIELD] = base_url.value
                else:
                    self._reject_stored(BASE_URL_FIELD, stored[BASE_URL_FIELD], base_url)
            if stored.get(PORT_FIELD):
                port = _parse_port(stored[PORT_FIELD])
                if isinstance(port, Ok):
                    changes[PORT_FIELD] = port.value
                else:
                    self._reject_stored(PORT_FIELD, stored[PORT_FIELD], port)
            self._settings = self._settings.model_copy(update=changes)
            logger.info(
                "Loaded server settings",
                key=self._key,
                base_url=self._settings.base_url,
                port=self._settings.port,
            )
            return self._settings

    def _reject_stored(self, field: str, value: str, error: Err) -> None:
        logger.warning(
            "Ignoring invalid persisted setting",
            key=self._key,
            field=field,
            value=value,
            reason=error.message,
        )

    async def _persist(self, changes: dict[str, str | int]) -> Outcome[None]:
        try:
            await self._redis.hset(self._key, mapping=changes)  # type: ignore[arg-type]
        except redis.RedisError as exc:
            return Err(
                ErrorKind.STORE_FAULT,
                f"Could not persist server settings: {exc}",
            )
        return Ok(None)
