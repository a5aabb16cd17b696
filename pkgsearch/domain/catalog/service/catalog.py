import logging

from pkgsearch.domain.catalog.model.entry import Catalog
from pkgsearch.domain.catalog.port.catalog_fetcher import CatalogFetcher
from pkgsearch.domain.shared.model.value import ValueObject
from pkgsearch.domain.shared.service import Service

logger = logging.getLogger(__name__)


class CatalogStats(ValueObject):
    packages: int
    libraries: int


class CatalogService(Service):
    fetcher: CatalogFetcher

    async def get_catalog(self) -> Catalog:
        # Fetched per request; caching belongs to the upstream edge.
        return await self.fetcher.fetch()

    async def get_stats(self) -> CatalogStats:
        catalog = await self.get_catalog()
        stats = CatalogStats(
            packages=catalog.count_packages(),
            libraries=catalog.count_libraries(),
        )
        logger.debug("Catalog stats: %s", stats)
        return stats
