"""Server settings request/response schemas."""

from pydantic import BaseModel, ConfigDict, Field


class ServerSettings(BaseModel):
    """Snapshot of the managed server settings."""

    model_config = ConfigDict(frozen=True)

    base_url: str | None = None
    port: int


# --- Requests ---


class BaseUrlUpdate(BaseModel):
    """Request to replace the base URL."""

    model_config = ConfigDict(populate_by_name=True)

    base_url: str = Field(alias="baseUrl", description="The base URL")


class PortUpdate(BaseModel):
    """Request to replace the port."""

    port: int = Field(description="The port of the service")


class ServerSettingsUpdate(BaseModel):
    """Request to replace base URL and port together."""

    model_config = ConfigDict(populate_by_name=True)

    base_url: str = Field(alias="baseUrl", description="The base URL")
    port: int = Field(description="The port of the service")


# --- Responses ---
# str() gives the plain-text rendering, model_dump(by_alias=True) the structured one.


class BaseUrlBody(BaseModel):
    """Current base URL."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    base_url: str = Field(alias="baseUrl")

    def __str__(self) -> str:
        return self.base_url


class PortBody(BaseModel):
    """Current port."""

    model_config = ConfigDict(frozen=True)

    port: int

    def __str__(self) -> str:
        return str(self.port)


class ServerSettingsBody(BaseModel):
    """Current base URL and port."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    base_url: str | None = Field(default=None, alias="baseUrl")
    port: int

    def __str__(self) -> str:
        return f"baseUrl={self.base_url or ''}\nport={self.port}"


class Confirmation(BaseModel):
    """Write confirmation; ``applied`` is kept for logging, not rendered."""

    model_config = ConfigDict(frozen=True)

    message: str
    applied: dict[str, str | int] = Field(default_factory=dict, exclude=True)

    def __str__(self) -> str:
        return self.message
