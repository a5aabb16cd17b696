"""Port for fetching the package catalog."""

from abc import abstractmethod
from typing import Protocol

from pkgsearch.domain.catalog.model.entry import Catalog
from pkgsearch.domain.shared.port import Port


class CatalogFetcher(Port, Protocol):
    """Fetches a full, read-only catalog snapshot.

    Implementations raise UpstreamFetchError when the source is unreachable,
    answers with a non-success status or returns an undecodable document.
    """

    @abstractmethod
    async def fetch(self) -> Catalog: ...
