"""DI provider for HTTP infrastructure."""

from collections.abc import AsyncIterable
from typing import NewType

import httpx
from dishka import provide

from pkgsearch.config import Config
from pkgsearch.domain.catalog.port.catalog_fetcher import CatalogFetcher
from pkgsearch.infrastructure.http.catalog_fetcher import HttpCatalogFetcher
from pkgsearch.util.di.base import Provider
from pkgsearch.util.di.scope import Scope

# Disambiguate from the command registrar's httpx.AsyncClient
CatalogHttpClient = NewType("CatalogHttpClient", httpx.AsyncClient)


class HttpProvider(Provider):
    """DI provider for HTTP fetcher adapters."""

    @provide(scope=Scope.APP)
    async def get_catalog_http_client(self, config: Config) -> AsyncIterable[CatalogHttpClient]:
        """Shared HTTP client for catalog downloads (connection pooling)."""
        timeout = httpx.Timeout(connect=5.0, read=config.catalog.timeout, write=5.0, pool=5.0)
        async with httpx.AsyncClient(timeout=timeout) as client:
            yield CatalogHttpClient(client)

    @provide(scope=Scope.APP, provides=CatalogFetcher)
    def get_catalog_fetcher(
        self, client: CatalogHttpClient, config: Config
    ) -> HttpCatalogFetcher:
        return HttpCatalogFetcher(client=client, url=config.catalog.url)
