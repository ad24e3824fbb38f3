"""Application configuration using Pydantic Settings V2."""

from functools import cached_property
from typing import Literal

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from app.core.settings import (
    AppConfig,
    AuthConfig,
    RedisConfig,
    ServerConfig,
    StoreConfig,
)
from app.core.outcome import Err
from app.services.settings_validator import validate_base_url


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Flat fields are loaded directly from environment variables.
    Domain properties provide grouped access (e.g. settings.server.port).
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    app_name: str = Field(
        default="server-settings",
        description="Application name",
    )
    app_env: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Application environment",
    )
    debug: bool = Field(
        default=True,
        description="Debug mode",
    )

    # Server
    host: str = Field(
        default="0.0.0.0",
        description="Server host",
    )
    port: int = Field(
        default=48080,
        ge=1,
        le=65535,
        description="Server port, also the initial value of the managed port",
    )
    base_url: str | None = Field(
        default=None,
        description="Initial public base URL (unset until configured)",
    )

    # JWT Auth
    jwt_secret_key: SecretStr = Field(
        description="JWT secret key for token signing",
    )
    jwt_algorithm: str = Field(
        default="HS256",
        description="JWT signing algorithm",
    )
    jwt_access_token_expire_minutes: int = Field(
        default=30,
        ge=1,
        le=1440,
        description="Access token expiration in minutes",
    )
    rate_limit: str = Field(
        default="60/minute",
        description="Per-client rate limit for all endpoints",
    )
    rate_limit_enabled: bool = Field(
        default=True,
        description="Enable the rate limiter",
    )

    # Settings store
    settings_store: Literal["memory", "redis"] = Field(
        default="memory",
        description="Backend holding the managed server settings",
    )
    settings_redis_key: str = Field(
        default="server_settings",
        description="Redis hash key for persisted server settings",
    )

    # Redis
    redis_url: str = Field(
        default="redis://localhost:6379/0",
        description="Redis connection URL",
    )

    @field_validator("base_url")
    @classmethod
    def validate_initial_base_url(cls, v: str | None) -> str | None:
        """Hold BASE_URL to the same rules as runtime updates."""
        if v is None:
            return v
        result = validate_base_url(v)
        if isinstance(result, Err):
            raise ValueError(result.message)
        return result.value

    # --- Domain properties ---

    @cached_property
    def app(self) -> AppConfig:
        """Application environment configuration."""
        return AppConfig(
            name=self.app_name,
            env=self.app_env,
            debug=self.debug,
        )

    @cached_property
    def server(self) -> ServerConfig:
        """Server configuration."""
        return ServerConfig(
            host=self.host,
            port=self.port,
            base_url=self.base_url,
        )

    @cached_property
    def auth(self) -> AuthConfig:
        """JWT authentication configuration."""
        return AuthConfig(
            secret_key=self.jwt_secret_key,
            algorithm=self.jwt_algorithm,
            access_token_expire_minutes=self.jwt_access_token_expire_minutes,
            rate_limit=self.rate_limit,
            rate_limit_enabled=self.rate_limit_enabled,
        )

    @cached_property
    def store(self) -> StoreConfig:
        """Settings store configuration."""
        return StoreConfig(
            backend=self.settings_store,
            redis_key=self.settings_redis_key,
        )

    @cached_property
    def redis(self) -> RedisConfig:
        """Redis connection configuration."""
        return RedisConfig(url=self.redis_url)

    # --- Convenience properties (delegate to domain configs) ---

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.app.is_development


# Global settings instance
settings = Settings()
