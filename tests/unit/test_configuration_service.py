"""Unit tests for ConfigurationService."""

import asyncio
from unittest.mock import AsyncMock

import pytest

from app.core.outcome import Err, ErrorKind, Ok
from app.repositories.settings_store import InMemorySettingsStore, SettingsStore
from app.schemas.server_settings_schema import (
    BaseUrlBody,
    PortBody,
    ServerSettings,
    ServerSettingsBody,
)
from app.services.configuration_service import (
    BASE_URL_NOT_DEFINED,
    BASE_URL_UPDATED,
    FAILED_SAVE_SERVER_SETTINGS,
    PORT_UPDATED,
    SUCCESSFUL_SAVE_SERVER_SETTINGS,
    ConfigurationService,
)


@pytest.fixture
def store() -> InMemorySettingsStore:
    return InMemorySettingsStore(default_port=80, base_url=None)


@pytest.fixture
def service(store: InMemorySettingsStore) -> ConfigurationService:
    return ConfigurationService(store)


@pytest.fixture
def failing_store() -> AsyncMock:
    store = AsyncMock(spec=SettingsStore)
    fault = Err(ErrorKind.STORE_FAULT, "Could not persist server settings: down")
    store.set_base_url.return_value = fault
    store.set_port.return_value = fault
    store.set_server_settings.return_value = fault
    return store


class TestBaseUrl:
    """get_base_url / set_base_url."""

    async def test_not_found_before_first_set(
        self, service: ConfigurationService
    ) -> None:
        assert await service.get_base_url() == Err(
            ErrorKind.NOT_FOUND, BASE_URL_NOT_DEFINED
        )

    async def test_round_trip(self, service: ConfigurationService) -> None:
        result = await service.set_base_url("https://example.com")
        assert isinstance(result, Ok)
        assert result.value.message == BASE_URL_UPDATED
        assert result.value.applied == {"base_url": "https://example.com"}

        assert await service.get_base_url() == Ok(
            BaseUrlBody(base_url="https://example.com")
        )

    async def test_invalid_leaves_value_untouched(
        self, service: ConfigurationService, store: InMemorySettingsStore
    ) -> None:
        await service.set_base_url("http://old")

        result = await service.set_base_url("not-a-url")

        assert isinstance(result, Err)
        assert result.kind is ErrorKind.INVALID_INPUT
        assert result.message.startswith("Could not update the base URL")
        assert await store.get_base_url() == "http://old"

    async def test_invalid_never_reaches_store(self) -> None:
        store = AsyncMock(spec=SettingsStore)
        result = await ConfigurationService(store).set_base_url("")
        assert isinstance(result, Err)
        store.set_base_url.assert_not_called()

    async def test_store_fault(self, failing_store: AsyncMock) -> None:
        result = await ConfigurationService(failing_store).set_base_url(
            "https://example.com"
        )
        assert isinstance(result, Err)
        assert result.kind is ErrorKind.STORE_FAULT
        failing_store.set_base_url.assert_awaited_once_with("https://example.com")


class TestPort:
    """get_port / set_port."""

    async def test_default_is_never_not_found(
        self, service: ConfigurationService
    ) -> None:
        assert await service.get_port() == Ok(PortBody(port=80))

    async def test_set_port(self, service: ConfigurationService) -> None:
        result = await service.set_port(443)
        assert isinstance(result, Ok)
        assert result.value.message == PORT_UPDATED
        assert await service.get_port() == Ok(PortBody(port=443))

    async def test_set_port_is_idempotent(
        self, service: ConfigurationService, store: InMemorySettingsStore
    ) -> None:
        await service.set_port(443)
        once = await store.get_settings()
        await service.set_port(443)
        assert await store.get_settings() == once

    @pytest.mark.parametrize("port", [0, 65536, -80])
    async def test_out_of_range(
        self, service: ConfigurationService, port: int
    ) -> None:
        result = await service.set_port(port)
        assert isinstance(result, Err)
        assert result.kind is ErrorKind.INVALID_INPUT
        assert await service.get_port() == Ok(PortBody(port=80))

    async def test_store_fault(self, failing_store: AsyncMock) -> None:
        result = await ConfigurationService(failing_store).set_port(8080)
        assert isinstance(result, Err)
        assert result.kind is ErrorKind.STORE_FAULT


class TestServerSettings:
    """Combined all-or-nothing update."""

    async def test_applies_both(
        self, service: ConfigurationService, store: InMemorySettingsStore
    ) -> None:
        result = await service.set_server_settings("https://example.com", 8080)

        assert isinstance(result, Ok)
        assert result.value.message == SUCCESSFUL_SAVE_SERVER_SETTINGS
        assert result.value.applied == {
            "base_url": "https://example.com",
            "port": 8080,
        }
        assert await store.get_settings() == ServerSettings(
            base_url="https://example.com", port=8080
        )

    async def test_invalid_url_applies_nothing(
        self, service: ConfigurationService, store: InMemorySettingsStore
    ) -> None:
        await service.set_server_settings("http://old", 80)

        result = await service.set_server_settings("not-a-url", 8080)

        assert isinstance(result, Err)
        assert result.kind is ErrorKind.INVALID_INPUT
        assert result.message.startswith(FAILED_SAVE_SERVER_SETTINGS)
        assert await store.get_settings() == ServerSettings(
            base_url="http://old", port=80
        )

    async def test_invalid_port_applies_nothing(
        self, service: ConfigurationService, store: InMemorySettingsStore
    ) -> None:
        await service.set_server_settings("http://old", 80)

        result = await service.set_server_settings("https://example.com", 70000)

        assert isinstance(result, Err)
        assert result.kind is ErrorKind.INVALID_INPUT
        assert await store.get_settings() == ServerSettings(
            base_url="http://old", port=80
        )

    async def test_base_url_error_reported_first(
        self, service: ConfigurationService
    ) -> None:
        result = await service.set_server_settings("", 0)
        assert isinstance(result, Err)
        assert "Base URL" in result.message
        assert "Port" not in result.message

    async def test_invalid_never_reaches_store(self) -> None:
        store = AsyncMock(spec=SettingsStore)
        await ConfigurationService(store).set_server_settings("https://ok.com", 0)
        store.set_server_settings.assert_not_called()
        store.set_base_url.assert_not_called()
        store.set_port.assert_not_called()

    async def test_store_fault(self, failing_store: AsyncMock) -> None:
        result = await ConfigurationService(failing_store).set_server_settings(
            "https://example.com", 8080
        )
        assert isinstance(result, Err)
        assert result.kind is ErrorKind.STORE_FAULT
        assert result.message.startswith(FAILED_SAVE_SERVER_SETTINGS)

    async def test_get_server_settings(self, service: ConfigurationService) -> None:
        await service.set_server_settings("https://example.com", 8080)
        assert await service.get_server_settings() == Ok(
            ServerSettingsBody(base_url="https://example.com", port=8080)
        )

    async def test_concurrent_updates_resolve_to_one_payload(
        self, service: ConfigurationService, store: InMemorySettingsStore
    ) -> None:
        payloads = [(f"https://node-{i}.example.com", 9000 + i) for i in range(25)]

        results = await asyncio.gather(
            *(service.set_server_settings(url, port) for url, port in payloads)
        )

        assert all(isinstance(r, Ok) for r in results)
        final = await store.get_settings()
        assert (final.base_url, final.port) in payloads
