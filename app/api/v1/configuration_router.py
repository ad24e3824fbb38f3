"""Server configuration API router."""

from typing import Annotated

import structlog
from fastapi import APIRouter, Depends, Header, Path, status
from fastapi.responses import Response

from app.api.renderer import preferred_format, render
from app.core.authorities import Authority
from app.core.outcome import Err, Ok, Outcome
from app.dependencies import get_configuration_service, require_authority
from app.schemas.server_settings_schema import (
    BaseUrlUpdate,
    Confirmation,
    PortUpdate,
    ServerSettingsUpdate,
)
from app.services.configuration_service import ConfigurationService

logger = structlog.get_logger()

router = APIRouter(prefix="/api/configuration/server", tags=["configuration"])

ConfigurationServiceDep = Annotated[
    ConfigurationService, Depends(get_configuration_service)
]
AcceptHeader = Annotated[str | None, Header()]

RESPONSES: dict[int | str, dict] = {
    status.HTTP_400_BAD_REQUEST: {"description": "The submitted value was rejected."},
    status.HTTP_403_FORBIDDEN: {"description": "Missing required authority."},
}


def _log_write(outcome: Outcome[Confirmation], event: str) -> None:
    """Record the outcome of a write with the applied values."""
    match outcome:
        case Ok(confirmation):
            logger.info(event, **confirmation.applied)
        case Err(kind, message):
            logger.warning(f"{event} failed", kind=kind.value, reason=message)


@router.get(
    "/baseUrl",
    dependencies=[Depends(require_authority(Authority.CONFIGURATION_VIEW_BASE_URL))],
    responses={
        status.HTTP_404_NOT_FOUND: {
            "description": "No value for baseUrl has been defined yet."
        }
    },
)
async def get_base_url(
    service: ConfigurationServiceDep,
    accept: AcceptHeader = None,
) -> Response:
    """Return the base URL of the service."""
    outcome = await service.get_base_url()
    return render(outcome, preferred_format(accept)).to_response()


@router.put(
    "/baseUrl",
    dependencies=[Depends(require_authority(Authority.CONFIGURATION_SET_BASE_URL))],
    responses=RESPONSES,
)
async def set_base_url(
    body: BaseUrlUpdate,
    service: ConfigurationServiceDep,
    accept: AcceptHeader = None,
) -> Response:
    """Update the base URL of the service."""
    outcome = await service.set_base_url(body.base_url)
    _log_write(outcome, "Set baseUrl")
    return render(outcome, preferred_format(accept)).to_response()


@router.get(
    "/port",
    dependencies=[Depends(require_authority(Authority.CONFIGURATION_VIEW_PORT))],
)
async def get_port(
    service: ConfigurationServiceDep,
    accept: AcceptHeader = None,
) -> Response:
    """Return the port of the service."""
    outcome = await service.get_port()
    return render(outcome, preferred_format(accept)).to_response()


async def _set_port(
    port: int, service: ConfigurationService, accept: str | None
) -> Response:
    outcome = await service.set_port(port)
    _log_write(outcome, "Set port (requires a server restart)")
    return render(outcome, preferred_format(accept)).to_response()


@router.put(
    "/port",
    dependencies=[Depends(require_authority(Authority.CONFIGURATION_SET_PORT))],
    responses=RESPONSES,
)
async def set_port(
    body: PortUpdate,
    service: ConfigurationServiceDep,
    accept: AcceptHeader = None,
) -> Response:
    """Set the port of the service."""
    return await _set_port(body.port, service, accept)


@router.put(
    "/port/{port}",
    dependencies=[Depends(require_authority(Authority.CONFIGURATION_SET_PORT))],
    responses=RESPONSES,
)
async def set_port_from_path(
    service: ConfigurationServiceDep,
    port: int = Path(description="The port of the service"),
    accept: AcceptHeader = None,
) -> Response:
    """Set the port of the service."""
    return await _set_port(port, service, accept)


@router.get(
    "/serverSettings",
    dependencies=[
        Depends(
            require_authority(
                Authority.CONFIGURATION_VIEW_BASE_URL,
                Authority.CONFIGURATION_VIEW_PORT,
            )
        )
    ],
)
async def get_server_settings(
    service: ConfigurationServiceDep,
    accept: AcceptHeader = None,
) -> Response:
    """Return the base URL and port of the service."""
    outcome = await service.get_server_settings()
    return render(outcome, preferred_format(accept)).to_response()


@router.post(
    "/serverSettings",
    dependencies=[
        Depends(
            require_authority(
                Authority.CONFIGURATION_SET_BASE_URL,
                Authority.CONFIGURATION_SET_PORT,
            )
        )
    ],
    responses=RESPONSES,
)
async def set_server_settings(
    body: ServerSettingsUpdate,
    service: ConfigurationServiceDep,
    accept: AcceptHeader = None,
) -> Response:
    """Set the base URL and port of the service together."""
    outcome = await service.set_server_settings(body.base_url, body.port)
    _log_write(outcome, "Server settings updated")
    return render(outcome, preferred_format(accept)).to_response()
