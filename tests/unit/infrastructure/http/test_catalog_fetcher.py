"""Unit tests for HttpCatalogFetcher adapter."""

import json
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from pkgsearch.domain.shared.error import UpstreamFetchError
from pkgsearch.infrastructure.http.catalog_fetcher import HttpCatalogFetcher

URL = "https://example.com/channel.json"


def _response(content: bytes) -> MagicMock:
    response = MagicMock(spec=httpx.Response)
    response.content = content
    response.raise_for_status = MagicMock()
    return response


class TestHttpCatalogFetcher:
    @pytest.mark.asyncio
    async def test_fetches_and_parses_channel(self):
        document = {
            "packages_cache": {"repo": [{"name": "LSP", "description": "client"}]},
            "libraries_cache": {"repo": [{"name": "lsp_utils", "description": "utils"}]},
        }
        client = AsyncMock(spec=httpx.AsyncClient)
        client.get.return_value = _response(json.dumps(document).encode())

        fetcher = HttpCatalogFetcher(client=client, url=URL)
        catalog = await fetcher.fetch()

        assert catalog.count_packages() == 1
        assert catalog.count_libraries() == 1
        client.get.assert_called_once_with(URL, follow_redirects=True)

    @pytest.mark.asyncio
    async def test_http_status_error(self):
        client = AsyncMock(spec=httpx.AsyncClient)
        response = _response(b"")
        response.raise_for_status.side_effect = httpx.HTTPStatusError(
            "Bad Gateway",
            request=MagicMock(),
            response=MagicMock(status_code=502),
        )
        client.get.return_value = response

        fetcher = HttpCatalogFetcher(client=client, url=URL)
        with pytest.raises(UpstreamFetchError, match="HTTP 502"):
            await fetcher.fetch()

    @pytest.mark.asyncio
    async def test_connection_error(self):
        client = AsyncMock(spec=httpx.AsyncClient)
        client.get.side_effect = httpx.ConnectError("refused")

        fetcher = HttpCatalogFetcher(client=client, url=URL)
        with pytest.raises(UpstreamFetchError, match="unreachable"):
            await fetcher.fetch()

    @pytest.mark.asyncio
    async def test_invalid_document(self):
        client = AsyncMock(spec=httpx.AsyncClient)
        client.get.return_value = _response(b"<html>not json</html>")

        fetcher = HttpCatalogFetcher(client=client, url=URL)
        with pytest.raises(UpstreamFetchError, match="could not be decoded"):
            await fetcher.fetch()
