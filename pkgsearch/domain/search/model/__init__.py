from pkgsearch.domain.search.model.value import (
    MAX_RESULTS,
    SearchFilters,
    SearchOutcome,
    SearchResult,
)

__all__ = ["MAX_RESULTS", "SearchFilters", "SearchOutcome", "SearchResult"]
