"""Settings store configuration."""

from typing import Literal

from pydantic import BaseModel


class StoreConfig(BaseModel, frozen=True):
    """Backend selection for the managed server settings."""

    backend: Literal["memory", "redis"]
    redis_key: str

    @property
    def is_persistent(self) -> bool:
        """Check if settings survive a restart."""
        return self.backend == "redis"
