from datetime import UTC, datetime
from typing import NewType
from uuid import uuid4

from pydantic import Field

from pkgsearch.domain.search.model.value import MAX_RESULTS, SearchResult
from pkgsearch.domain.shared.error import CursorOutOfRangeError
from pkgsearch.domain.shared.model.value import ValueObject

SessionId = NewType("SessionId", str)


def new_session_id() -> SessionId:
    """Random hex id: no underscores, 32 chars, fits inside component handles."""
    return SessionId(uuid4().hex)


class SearchSession(ValueObject):
    """Materialized result set of one search, stored with a TTL."""

    session_id: SessionId
    query: str
    user_id: str | None = None
    results: list[SearchResult] = Field(min_length=1, max_length=MAX_RESULTS)
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    def __len__(self) -> int:
        return len(self.results)

    def result_at(self, index: int) -> SearchResult:
        if not 0 <= index < len(self.results):
            raise CursorOutOfRangeError(index, len(self.results))
        return self.results[index]


class NavigationCursor(ValueObject):
    """Position inside a session, rebuilt from a component handle each turn."""

    session_id: SessionId
    index: int = Field(ge=0)

    def step(self, delta: int, length: int) -> "NavigationCursor":
        """Move by ``delta``; never clamps.

        Raises:
            CursorOutOfRangeError: If the new index is outside [0, length).
        """
        index = self.index + delta
        if not 0 <= index < length:
            raise CursorOutOfRangeError(index, length)
        return NavigationCursor(session_id=self.session_id, index=index)


class MenuSelection(ValueObject):
    """One option of the result picker."""

    name: str
    repository: str
    index: int = Field(ge=0)
