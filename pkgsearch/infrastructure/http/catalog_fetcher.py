"""HTTP adapter for the CatalogFetcher port."""

import logging

import httpx
from pydantic import ValidationError as PydanticValidationError

from pkgsearch.domain.catalog.model.entry import Catalog
from pkgsearch.domain.catalog.port.catalog_fetcher import CatalogFetcher
from pkgsearch.domain.shared.error import UpstreamFetchError

logger = logging.getLogger(__name__)


class HttpCatalogFetcher(CatalogFetcher):
    """Downloads channel.json with httpx and validates it into a Catalog."""

    def __init__(self, client: httpx.AsyncClient, url: str) -> None:
        self._client = client
        self._url = url

    async def fetch(self) -> Catalog:
        logger.debug("Fetching channel data from %s", self._url)
        try:
            response = await self._client.get(self._url, follow_redirects=True)
            response.raise_for_status()
            catalog = Catalog.model_validate_json(response.content)
        except httpx.HTTPStatusError as e:
            logger.error("Channel fetch returned HTTP %s", e.response.status_code)
            raise UpstreamFetchError(
                f"Catalog source answered HTTP {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            logger.error("Channel fetch failed: %s", e)
            raise UpstreamFetchError("Catalog source unreachable") from e
        except PydanticValidationError as e:
            logger.error("Channel document invalid: %s", e.error_count())
            raise UpstreamFetchError("Catalog document could not be decoded") from e

        logger.debug(
            "Channel data fetched: %d packages, %d libraries",
            catalog.count_packages(),
            catalog.count_libraries(),
        )
        return catalog
