"""Redis connection configuration."""

from urllib.parse import urlsplit, urlunsplit

from pydantic import BaseModel


class RedisConfig(BaseModel, frozen=True):
    """Redis connection settings for the persistent settings store."""

    url: str

    @property
    def redacted_url(self) -> str:
        """URL safe for logging (password masked)."""
        parts = urlsplit(self.url)
        if parts.password is None:
            return self.url
        netloc = parts.netloc.replace(f":{parts.password}@", ":***@", 1)
        return urlunsplit(parts._replace(netloc=netloc))
