"""Domain-specific configuration models."""

from app.core.settings.app_config import AppConfig
from app.core.settings.auth_config import AuthConfig
from app.core.settings.redis_config import RedisConfig
from app.core.settings.server_config import ServerConfig
from app.core.settings.store_config import StoreConfig

__all__ = [
    "AppConfig",
    "AuthConfig",
    "RedisConfig",
    "ServerConfig",
    "StoreConfig",
]
