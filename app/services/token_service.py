"""JWT access token creation and validation."""

import uuid
from datetime import UTC, datetime, timedelta

import jwt

from app.core.config import settings
from app.core.exceptions import (
    InvalidTokenError,
    TokenExpiredError,
)
from app.schemas.auth_schema import TokenPayload


class TokenService:
    """Issue and decode JWT access tokens carrying configuration authorities."""

    def __init__(self) -> None:
        self._secret = settings.auth.secret_key.get_secret_value()
        self._algorithm = settings.auth.algorithm

    def create_access_token(
        self,
        subject: str,
        role: str,
        authorities: list[str] | None = None,
        expires_in: timedelta | None = None,
    ) -> str:
        """Create a signed JWT access token."""
        now = datetime.now(UTC)
        expire = now + (
            expires_in or timedelta(minutes=settings.auth.access_token_expire_minutes)
        )
        payload = {
            "sub": subject,
            "role": role,
            "authorities": sorted(authorities or []),
            "type": "access",
            "jti": str(uuid.uuid4()),
            "iat": now,
            "exp": expire,
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def decode_token(self, token: str) -> TokenPayload:
        """Decode and validate a JWT token."""
        try:
            payload = jwt.decode(token, self._secret, algorithms=[self._algorithm])
        except jwt.ExpiredSignatureError as e:
            raise TokenExpiredError from e
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError from e

        try:
            return TokenPayload(
                sub=payload["sub"],
                role=payload["role"],
                authorities=payload.get("authorities", []),
                type=payload["type"],
                jti=payload["jti"],
                exp=payload["exp"],
            )
        except (KeyError, ValueError) as e:
            raise InvalidTokenError from e
