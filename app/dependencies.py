"""Global dependencies for the application."""

from collections.abc import Callable

from fastapi import Depends, Request
from pydantic import BaseModel, ConfigDict

from app.core.authorities import Authority
from app.core.exceptions import AuthenticationError, AuthorizationError
from app.core.state import get_settings_store
from app.repositories.settings_store import SettingsStore
from app.services.configuration_service import ConfigurationService

# --- Auth dependencies ---


class CurrentUser(BaseModel):
    """Authenticated principal extracted from request state."""

    model_config = ConfigDict(frozen=True)

    subject: str
    role: str
    authorities: frozenset[str]


def get_current_user(request: Request) -> CurrentUser:
    """Extract the authenticated principal from middleware-populated state."""
    state = getattr(request, "state", None)
    subject = getattr(state, "subject", None) if state else None
    if subject is None:
        raise AuthenticationError(message="Not authenticated")
    return CurrentUser(
        subject=state.subject,
        role=state.role,
        authorities=state.authorities,
    )


def require_authority(*required: Authority) -> Callable[..., CurrentUser]:
    """Dependency factory that enforces every listed authority."""

    def _check(
        current_user: CurrentUser = Depends(get_current_user),
    ) -> CurrentUser:
        missing = [str(a) for a in required if str(a) not in current_user.authorities]
        if missing:
            raise AuthorizationError(
                message=f"Missing required authority: {', '.join(missing)}"
            )
        return current_user

    return _check


# --- Configuration dependencies ---


def get_store() -> SettingsStore:
    """Get the process-wide settings store."""
    return get_settings_store()


def get_configuration_service(
    store: SettingsStore = Depends(get_store),
) -> ConfigurationService:
    """Get ConfigurationService bound to the settings store."""
    return ConfigurationService(store)
