"""Structural validation for candidate server settings."""

from urllib.parse import urlsplit

from pydantic import AnyUrl, TypeAdapter, ValidationError

from app.core.outcome import Err, ErrorKind, Ok, Outcome

MIN_PORT = 1
MAX_PORT = 65535

_url_adapter: TypeAdapter[AnyUrl] = TypeAdapter(AnyUrl)


def validate_base_url(candidate: str) -> Outcome[str]:
    """Accept an absolute URL (scheme + host).

    Surrounding whitespace is stripped; the rest of the candidate is returned
    untouched so that reads give back exactly what was written.
    """
    if not isinstance(candidate, str):
        return Err(ErrorKind.INVALID_INPUT, "Base URL must be a string")

    normalized = candidate.strip()
    if not normalized:
        return Err(ErrorKind.INVALID_INPUT, "Base URL must not be empty")

    if any(c.isspace() or not c.isprintable() for c in normalized):
        return Err(
            ErrorKind.INVALID_INPUT,
            "Base URL must not contain whitespace or control characters",
        )

    try:
        url = _url_adapter.validate_python(normalized)
    except ValidationError:
        return Err(ErrorKind.INVALID_INPUT, f"'{normalized}' is not a valid URL")

    if not url.host or not urlsplit(normalized).netloc:
        return Err(
            ErrorKind.INVALID_INPUT,
            f"'{normalized}' is not an absolute URL with a scheme and host",
        )
    return Ok(normalized)


def validate_port(candidate: int) -> Outcome[int]:
    """Accept an integer port in [1, 65535]."""
    if isinstance(candidate, bool) or not isinstance(candidate, int):
        return Err(ErrorKind.INVALID_INPUT, "Port must be an integer")
    if not MIN_PORT <= candidate <= MAX_PORT:
        return Err(
            ErrorKind.INVALID_INPUT,
            f"Port must be between {MIN_PORT} and {MAX_PORT}, got {candidate}",
        )
    return Ok(candidate)
