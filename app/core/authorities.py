"""Capabilities checked before configuration operations are reached."""

from enum import StrEnum


class Authority(StrEnum):
    """Named permission tokens carried by an authenticated principal."""

    CONFIGURATION_SET_BASE_URL = "CONFIGURATION_SET_BASE_URL"
    CONFIGURATION_VIEW_BASE_URL = "CONFIGURATION_VIEW_BASE_URL"
    CONFIGURATION_SET_PORT = "CONFIGURATION_SET_PORT"
    CONFIGURATION_VIEW_PORT = "CONFIGURATION_VIEW_PORT"


ROLE_AUTHORITIES: dict[str, frozenset[Authority]] = {
    "admin": frozenset(Authority),
    "viewer": frozenset(
        {Authority.CONFIGURATION_VIEW_BASE_URL, Authority.CONFIGURATION_VIEW_PORT}
    ),
}


def resolve_authorities(role: str, granted: list[str] | None = None) -> frozenset[str]:
    """Combine the authorities implied by a role with explicitly granted ones."""
    implied = {str(authority) for authority in ROLE_AUTHORITIES.get(role, frozenset())}
    return frozenset(implied | set(granted or []))
