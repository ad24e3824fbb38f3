"""Pytest configuration and fixtures."""

import os

os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-for-configuration-api-0123")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")
os.environ.setdefault("SETTINGS_STORE", "memory")

from collections.abc import AsyncGenerator, Callable  # noqa: E402

import fakeredis.aioredis  # noqa: E402
import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from app.core.authorities import Authority  # noqa: E402
from app.repositories.settings_store import InMemorySettingsStore  # noqa: E402
from app.services.token_service import TokenService  # noqa: E402

DEFAULT_PORT = 48080

# --- Settings store ---


@pytest.fixture
def settings_store() -> InMemorySettingsStore:
    """Create a fresh in-memory settings store."""
    return InMemorySettingsStore(default_port=DEFAULT_PORT)


@pytest.fixture(autouse=True)
def patch_settings_store(
    settings_store: InMemorySettingsStore, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Install the test store as the process-wide settings store."""
    monkeypatch.setattr("app.core.state.settings_store", settings_store)


# --- Test Redis (fakeredis) ---


@pytest.fixture
def fake_redis() -> fakeredis.aioredis.FakeRedis:
    """Create a fresh fake Redis client."""
    return fakeredis.aioredis.FakeRedis(decode_responses=True)


# --- Token helpers ---


@pytest.fixture
def token_service() -> TokenService:
    """Create a TokenService signing with the test secret."""
    return TokenService()


def make_auth_headers(
    role: str = "none",
    authorities: list[Authority] | None = None,
    subject: str = "tester",
) -> dict[str, str]:
    """Generate Authorization headers with a valid access token."""
    token = TokenService().create_access_token(
        subject=subject,
        role=role,
        authorities=[str(a) for a in authorities or []],
    )
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def auth_headers() -> Callable[..., dict[str, str]]:
    """Expose the header factory to tests."""
    return make_auth_headers


# --- App & client fixtures ---


def _get_app():  # type: ignore[no-untyped-def]
    """Import app lazily."""
    from app.main import app

    return app


def _client(headers: dict[str, str] | None = None) -> AsyncClient:
    transport = ASGITransport(app=_get_app())
    return AsyncClient(transport=transport, base_url="http://test", headers=headers)


@pytest.fixture
async def async_client() -> AsyncGenerator[AsyncClient, None]:
    """Create an unauthenticated async test client."""
    async with _client() as ac:
        yield ac


@pytest.fixture
async def admin_client() -> AsyncGenerator[AsyncClient, None]:
    """Create an async test client holding every configuration authority."""
    async with _client(make_auth_headers(role="admin")) as ac:
        yield ac


@pytest.fixture
async def viewer_client() -> AsyncGenerator[AsyncClient, None]:
    """Create an async test client with view-only authorities."""
    async with _client(make_auth_headers(role="viewer")) as ac:
        yield ac
