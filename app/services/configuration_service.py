"""Server configuration business logic."""

from app.core.outcome import Err, ErrorKind, Ok, Outcome
from app.repositories.settings_store import SettingsStore
from app.schemas.server_settings_schema import (
    BaseUrlBody,
    Confirmation,
    PortBody,
    ServerSettingsBody,
)
from app.services.settings_validator import validate_base_url, validate_port

BASE_URL_UPDATED = "The base URL was updated."
BASE_URL_UPDATE_FAILED = "Could not update the base URL of the service."
BASE_URL_NOT_DEFINED = "No value for baseUrl has been defined yet."
PORT_UPDATED = "The port was updated."
PORT_UPDATE_FAILED = "Could not update the port of the service."
SUCCESSFUL_SAVE_SERVER_SETTINGS = "The server settings were updated successfully."
FAILED_SAVE_SERVER_SETTINGS = (
    "Server settings cannot be saved because the submitted form contains errors!"
)


def _prefixed(error: Err, prefix: str) -> Err:
    return Err(error.kind, f"{prefix} {error.message}")


class ConfigurationService:
    """Validates and applies changes to the base URL and port.

    Every operation returns an ``Outcome``; nothing here raises for bad input
    or store faults. The first error encountered is returned and no partial
    write is ever made.
    """

    def __init__(self, store: SettingsStore) -> None:
        self._store = store

    async def get_base_url(self) -> Outcome[BaseUrlBody]:
        """Return the base URL, or NOT_FOUND if it was never set."""
        base_url = await self._store.get_base_url()
        if base_url is None:
            return Err(ErrorKind.NOT_FOUND, BASE_URL_NOT_DEFINED)
        return Ok(BaseUrlBody(base_url=base_url))

    async def set_base_url(self, candidate: str) -> Outcome[Confirmation]:
        """Validate and store a new base URL."""
        validated = validate_base_url(candidate)
        if isinstance(validated, Err):
            return _prefixed(validated, BASE_URL_UPDATE_FAILED)

        stored = await self._store.set_base_url(validated.value)
        if isinstance(stored, Err):
            return _prefixed(stored, BASE_URL_UPDATE_FAILED)

        return Ok(
            Confirmation(message=BASE_URL_UPDATED, applied={"base_url": validated.value})
        )

    async def get_port(self) -> Outcome[PortBody]:
        """Return the port. There is always a value."""
        return Ok(PortBody(port=await self._store.get_port()))

    async def set_port(self, candidate: int) -> Outcome[Confirmation]:
        """Validate and store a new port."""
        validated = validate_port(candidate)
        if isinstance(validated, Err):
            return _prefixed(validated, PORT_UPDATE_FAILED)

        stored = await self._store.set_port(validated.value)
        if isinstance(stored, Err):
            return _prefixed(stored, PORT_UPDATE_FAILED)

        return Ok(Confirmation(message=PORT_UPDATED, applied={"port": validated.value}))

    async def get_server_settings(self) -> Outcome[ServerSettingsBody]:
        """Return both settings from a single snapshot."""
        current = await self._store.get_settings()
        return Ok(ServerSettingsBody(base_url=current.base_url, port=current.port))

    async def set_server_settings(
        self, base_url_candidate: str, port_candidate: int
    ) -> Outcome[Confirmation]:
        """Apply base URL and port together, or neither.

        Both candidates are validated before the store is touched.
        """
        base_url = validate_base_url(base_url_candidate)
        if isinstance(base_url, Err):
            return _prefixed(base_url, FAILED_SAVE_SERVER_SETTINGS)

        port = validate_port(port_candidate)
        if isinstance(port, Err):
            return _prefixed(port, FAILED_SAVE_SERVER_SETTINGS)

        stored = await self._store.set_server_settings(base_url.value, port.value)
        if isinstance(stored, Err):
            return _prefixed(stored, FAILED_SAVE_SERVER_SETTINGS)

        return Ok(
            Confirmation(
                message=SUCCESSFUL_SAVE_SERVER_SETTINGS,
                applied={"base_url": base_url.value, "port": port.value},
            )
        )
