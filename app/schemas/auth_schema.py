"""Authentication schemas."""

from pydantic import BaseModel, ConfigDict


class TokenPayload(BaseModel):
    """Decoded JWT payload."""

    model_config = ConfigDict(frozen=True)

    sub: str
    role: str
    authorities: list[str] = []
    type: str
    jti: str
    exp: int
