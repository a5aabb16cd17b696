"""Unit tests for the interactions webhook route."""

import json
from collections.abc import Iterator
from unittest.mock import AsyncMock, MagicMock

import pytest
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey
from cryptography.hazmat.primitives.serialization import Encoding, PublicFormat
from dishka import AsyncContainer, make_async_container, provide
from fastapi.testclient import TestClient

from pkgsearch.application.api.rest.app import create_app
from pkgsearch.config import Config, DiscordConfig
from pkgsearch.domain.catalog.model.entry import Catalog
from pkgsearch.domain.catalog.port.catalog_fetcher import CatalogFetcher
from pkgsearch.domain.catalog.util.di import CatalogProvider
from pkgsearch.domain.interaction.util.di import InteractionProvider
from pkgsearch.domain.search.util.di import SearchProvider
from pkgsearch.domain.session.util.di import SessionProvider
from pkgsearch.infrastructure.discord.di import DiscordProvider
from pkgsearch.infrastructure.session.di import SessionStoreProvider
from pkgsearch.util.di import ConfigProvider, Provider, Scope

TIMESTAMP = "1700000000"


class StubCatalogProvider(Provider):
    """Serves a fixed catalog instead of downloading channel.json."""

    def __init__(self, catalog: Catalog) -> None:
        super().__init__()
        self._catalog = catalog

    @provide(scope=Scope.APP)
    def get_catalog_fetcher(self) -> CatalogFetcher:
        fetcher = MagicMock(spec=CatalogFetcher)
        fetcher.fetch = AsyncMock(return_value=self._catalog)
        return fetcher


@pytest.fixture
def private_key() -> Ed25519PrivateKey:
    return Ed25519PrivateKey.generate()


@pytest.fixture
def config(private_key: Ed25519PrivateKey) -> Config:
    public_hex = private_key.public_key().public_bytes(Encoding.Raw, PublicFormat.Raw).hex()
    return Config(discord=DiscordConfig(public_key=public_hex))


@pytest.fixture
def container(config: Config, catalog: Catalog) -> AsyncContainer:
    return make_async_container(
        ConfigProvider(),
        StubCatalogProvider(catalog),
        SessionStoreProvider(),
        DiscordProvider(),
        CatalogProvider(),
        SearchProvider(),
        SessionProvider(),
        InteractionProvider(),
        context={Config: config},
        scopes=Scope,  # type: ignore[arg-type]
    )


@pytest.fixture
def client(config: Config, container: AsyncContainer) -> Iterator[TestClient]:
    app = create_app(config=config, container=container)
    with TestClient(app) as test_client:
        yield test_client


def signed_post(client: TestClient, private_key: Ed25519PrivateKey, payload: dict):
    body = json.dumps(payload).encode()
    signature = private_key.sign(TIMESTAMP.encode() + body).hex()
    return client.post(
        "/api/v1/interactions",
        content=body,
        headers={
            "Content-Type": "application/json",
            "X-Signature-Ed25519": signature,
            "X-Signature-Timestamp": TIMESTAMP,
        },
    )


class TestSignatureCheck:
    """Requests must be signed with the application key."""

    def test_missing_headers(self, client: TestClient):
        response = client.post("/api/v1/interactions", json={"type": 1})

        assert response.status_code == 401

    def test_bad_signature(self, client: TestClient):
        response = client.post(
            "/api/v1/interactions",
            json={"type": 1},
            headers={"X-Signature-Ed25519": "00" * 64, "X-Signature-Timestamp": TIMESTAMP},
        )

        assert response.status_code == 401

    def test_signed_ping(self, client: TestClient, private_key: Ed25519PrivateKey):
        response = signed_post(client, private_key, {"type": 1})

        assert response.status_code == 200
        assert response.json() == {"type": 1}

    def test_malformed_payload(self, client: TestClient, private_key: Ed25519PrivateKey):
        response = signed_post(client, private_key, {"no_type": True})

        assert response.status_code == 400


class TestInteractionFlow:
    def test_search_and_navigate(self, client: TestClient, private_key: Ed25519PrivateKey):
        """A search opens a session that a later Next press can read."""
        first = signed_post(
            client,
            private_key,
            {
                "type": 2,
                "data": {
                    "name": "packages",
                    "options": [{"name": "query", "type": 3, "value": "lsp"}],
                },
                "member": {"user": {"id": "42"}},
            },
        ).json()

        assert first["type"] == 4
        assert "flags" not in first["data"]
        next_button = first["data"]["components"][0]["components"][1]
        assert next_button["disabled"] is False

        second = signed_post(
            client,
            private_key,
            {
                "type": 3,
                "data": {"custom_id": next_button["custom_id"], "component_type": 2},
            },
        ).json()

        assert second["type"] == 7
        assert second["data"]["embeds"][0]["footer"]["text"].startswith("Result 2 of 3")

    def test_expired_session(self, client: TestClient, private_key: Ed25519PrivateKey):
        response = signed_post(
            client,
            private_key,
            {"type": 3, "data": {"custom_id": "next_package_deadbeef_0", "component_type": 2}},
        ).json()

        assert response == {
            "type": 7,
            "data": {
                "content": "⏰ Search results expired. Please search again with `/packages`.",
                "embeds": [],
                "components": [],
            },
        }

    def test_empty_query_is_ephemeral(self, client: TestClient, private_key: Ed25519PrivateKey):
        response = signed_post(
            client,
            private_key,
            {"type": 2, "data": {"name": "packages", "options": []}},
        ).json()

        assert response["data"]["flags"] == 64


class TestHealth:
    def test_health(self, client: TestClient):
        response = client.get("/api/v1/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
        assert response.json()["session_backend"] == "memory"
