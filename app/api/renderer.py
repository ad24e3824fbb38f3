"""Content-negotiated rendering of configuration outcomes."""

from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from fastapi import status
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from pydantic import BaseModel

from app.core.outcome import Err, ErrorKind, Ok, Outcome
from app.schemas.response_schema import ErrorResponse

JSON_MEDIA_TYPE = "application/json"
TEXT_MEDIA_TYPE = "text/plain"


class Format(StrEnum):
    """Response representation requested by the caller."""

    STRUCTURED = "structured"
    PLAIN = "plain"


_MEDIA_TYPE_FORMATS: dict[str, Format] = {
    JSON_MEDIA_TYPE: Format.STRUCTURED,
    TEXT_MEDIA_TYPE: Format.PLAIN,
}

# STORE_FAULT shares the client-error status with INVALID_INPUT; the body's
# code still tells them apart.
ERROR_STATUS: dict[ErrorKind, int] = {
    ErrorKind.INVALID_INPUT: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.STORE_FAULT: status.HTTP_400_BAD_REQUEST,
}


@dataclass(frozen=True, slots=True)
class RenderedResponse:
    """Status, media type and body ready to be sent."""

    status_code: int
    media_type: str
    content: str | dict[str, Any]

    def to_response(self) -> Response:
        """Build the matching Starlette response."""
        if isinstance(self.content, dict):
            return JSONResponse(status_code=self.status_code, content=self.content)
        return PlainTextResponse(status_code=self.status_code, content=self.content)


def preferred_format(accept: str | None) -> Format:
    """Pick a format from an Accept header value.

    The first recognized media type wins. A media type sent with ``q=0`` is
    refused by the client and skipped; other q-values do not reorder.
    """
    if not accept:
        return Format.PLAIN
    for part in accept.split(","):
        media_type, *params = part.split(";")
        media_type = media_type.strip().lower()
        if media_type in _MEDIA_TYPE_FORMATS and not _is_refused(params):
            return _MEDIA_TYPE_FORMATS[media_type]
    return Format.PLAIN


def _is_refused(params: list[str]) -> bool:
    for param in params:
        name, _, value = param.partition("=")
        if name.strip().lower() == "q":
            try:
                return float(value.strip()) == 0
            except ValueError:
                return False
    return False


def render(outcome: Outcome[Any], fmt: Format) -> RenderedResponse:
    """Map an outcome to a response in the requested format."""
    if isinstance(outcome, Ok):
        return _render_value(outcome.value, fmt, status.HTTP_200_OK)
    return _render_error(outcome, fmt)


def _render_value(value: Any, fmt: Format, status_code: int) -> RenderedResponse:
    if fmt is Format.STRUCTURED:
        if isinstance(value, BaseModel):
            content: dict[str, Any] = value.model_dump(by_alias=True)
        else:
            content = {"value": value}
        return RenderedResponse(status_code, JSON_MEDIA_TYPE, content)
    return RenderedResponse(status_code, TEXT_MEDIA_TYPE, str(value))


def _render_error(error: Err, fmt: Format) -> RenderedResponse:
    status_code = ERROR_STATUS[error.kind]
    if fmt is Format.STRUCTURED:
        return RenderedResponse(
            status_code,
            JSON_MEDIA_TYPE,
            ErrorResponse(
                status=status_code, message=error.message, code=error.kind.value
            ).model_dump(),
        )
    return RenderedResponse(status_code, TEXT_MEDIA_TYPE, error.message)
