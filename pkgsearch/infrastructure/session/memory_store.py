"""In-process SessionStore with TTL, for development and tests.

Only valid for a single worker process; use the Redis backend otherwise.
"""

import logging
import time
from collections.abc import Callable

from pkgsearch.domain.session.model.value import SearchSession, SessionId
from pkgsearch.domain.session.port.session_store import SessionStore

logger = logging.getLogger(__name__)


class InMemorySessionStore(SessionStore):
    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        # Values are kept serialized, like an external store would
        self._entries: dict[str, tuple[float, str]] = {}

    def _purge_expired(self) -> None:
        now = self._clock()
        expired = [key for key, (expires_at, _) in self._entries.items() if expires_at <= now]
        for key in expired:
            del self._entries[key]

    async def put(self, session: SearchSession, ttl_seconds: int) -> None:
        self._purge_expired()
        self._entries[session.session_id] = (
            self._clock() + ttl_seconds,
            session.model_dump_json(),
        )

    async def get(self, session_id: SessionId) -> SearchSession | None:
        self._purge_expired()
        entry = self._entries.get(session_id)
        if entry is None:
            return None
        return SearchSession.model_validate_json(entry[1])

    def __len__(self) -> int:
        self._purge_expired()
        return len(self._entries)
