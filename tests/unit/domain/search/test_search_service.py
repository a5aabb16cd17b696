"""Unit tests for SearchService."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from pkgsearch.domain.catalog.model.entry import Catalog
from pkgsearch.domain.catalog.service.catalog import CatalogService
from pkgsearch.domain.search.service.search import SearchService
from pkgsearch.domain.shared.error import UpstreamFetchError, ValidationError


@pytest.fixture
def mock_catalog_service(catalog: Catalog) -> CatalogService:
    service = MagicMock(spec=CatalogService)
    service.get_catalog = AsyncMock(return_value=catalog)
    return service


class TestSearchService:
    """Tests for SearchService.search."""

    @pytest.mark.asyncio
    async def test_search_returns_outcome(self, mock_catalog_service: CatalogService):
        service = SearchService(catalog_service=mock_catalog_service)

        outcome = await service.search("author:sublimelsp LSP")

        assert outcome.filters.author == "sublimelsp"
        assert outcome.filters.text_query == "LSP"
        assert not outcome.is_regex
        assert [r.name for r in outcome.results] == ["LSP", "LSP-json", "lsp_utils"]

    @pytest.mark.asyncio
    async def test_regex_flag(self, mock_catalog_service: CatalogService):
        service = SearchService(catalog_service=mock_catalog_service)

        outcome = await service.search("/^LSP/")

        assert outcome.is_regex

    @pytest.mark.asyncio
    @pytest.mark.parametrize("query", [None, "", "   "])
    async def test_empty_query_is_rejected(
        self, mock_catalog_service: CatalogService, query: str | None
    ):
        """Empty queries fail validation without fetching the catalog."""
        service = SearchService(catalog_service=mock_catalog_service)

        with pytest.raises(ValidationError, match="provide a search query"):
            await service.search(query)

        mock_catalog_service.get_catalog.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_invalid_regex_is_rejected_before_fetch(
        self, mock_catalog_service: CatalogService
    ):
        service = SearchService(catalog_service=mock_catalog_service)

        with pytest.raises(ValidationError, match="Invalid regex"):
            await service.search("/[a-/")

        mock_catalog_service.get_catalog.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_upstream_failure_propagates(self, mock_catalog_service: CatalogService):
        mock_catalog_service.get_catalog.side_effect = UpstreamFetchError("boom")
        service = SearchService(catalog_service=mock_catalog_service)

        with pytest.raises(UpstreamFetchError):
            await service.search("LSP")
