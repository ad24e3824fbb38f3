"""JWT authentication configuration."""

from pydantic import BaseModel, SecretStr


class AuthConfig(BaseModel, frozen=True):
    """JWT authentication and rate limit settings."""

    secret_key: SecretStr
    algorithm: str
    access_token_expire_minutes: int
    rate_limit: str
    rate_limit_enabled: bool
