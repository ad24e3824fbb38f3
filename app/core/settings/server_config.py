"""Server configuration."""

from pydantic import BaseModel


class ServerConfig(BaseModel, frozen=True):
    """Server settings.

    ``port`` and ``base_url`` are the initial values of the managed settings.
    """

    host: str
    port: int
    base_url: str | None = None
