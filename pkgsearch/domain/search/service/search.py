import logging

import logfire

from pkgsearch.domain.catalog.model.entry import Catalog
from pkgsearch.domain.catalog.service.catalog import CatalogService
from pkgsearch.domain.search.model.value import SearchFilters, SearchOutcome
from pkgsearch.domain.search.util.query_parser import parse_query
from pkgsearch.domain.search.util.relevance import (
    compile_query_pattern,
    is_regex_query,
    rank,
)
from pkgsearch.domain.shared.error import ValidationError
from pkgsearch.domain.shared.service import Service

logger = logging.getLogger(__name__)


class SearchService(Service):
    catalog_service: CatalogService

    async def search(self, raw_query: str | None) -> SearchOutcome:
        """Parse a raw query, fetch the catalog and rank it.

        Raises:
            ValidationError: Empty query or invalid regex.
            UpstreamFetchError: Catalog could not be fetched.
        """
        if not raw_query or not raw_query.strip():
            raise ValidationError("Please provide a search query.", field="query")

        filters = parse_query(raw_query.strip())
        with logfire.span("SearchPackages", query=raw_query):
            # Validate the pattern before paying for the catalog fetch
            if filters.text_query and is_regex_query(filters.text_query):
                compile_query_pattern(filters.text_query)
            catalog = await self.catalog_service.get_catalog()
            return self.search_catalog(filters, catalog)

    def search_catalog(self, filters: SearchFilters, catalog: Catalog) -> SearchOutcome:
        results = rank(filters, catalog)
        is_regex = bool(filters.text_query) and is_regex_query(filters.text_query)
        logger.info(
            "Search %r (author=%s, label=%s, regex=%s): %d results",
            filters.text_query,
            filters.author,
            filters.label,
            is_regex,
            len(results),
        )
        return SearchOutcome(filters=filters, is_regex=is_regex, results=results)
