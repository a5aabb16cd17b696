from pydantic import Field

from pkgsearch.domain.shared.model.value import ValueObject

# Result sets are truncated to this many entries
MAX_RESULTS = 10


class SearchFilters(ValueObject):
    """A raw query split into filter values and the residual text query."""

    author: str | None = None
    label: str | None = None  # Only Package entries carry labels
    text_query: str = ""

    @property
    def has_filters(self) -> bool:
        return self.author is not None or self.label is not None


class SearchResult(ValueObject):
    """Ranked, flattened projection of one catalog entry."""

    name: str
    description: str
    authors: list[str] = []
    kind: str
    repository: str
    relevance_score: int = Field(ge=0)
    labels: list[str] = []
    latest_version: str | None = None
    homepage: str | None = None
    issues: str | None = None
    last_modified: str | None = None


class SearchOutcome(ValueObject):
    filters: SearchFilters
    is_regex: bool = False
    results: list[SearchResult] = Field(default_factory=list, max_length=MAX_RESULTS)
