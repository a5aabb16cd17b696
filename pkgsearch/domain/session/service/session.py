import logging

from pkgsearch.domain.search.model.value import SearchResult
from pkgsearch.domain.session.model.value import SearchSession, SessionId, new_session_id
from pkgsearch.domain.session.port.session_store import SessionStore
from pkgsearch.domain.shared.error import SessionExpiredError
from pkgsearch.domain.shared.service import Service

logger = logging.getLogger(__name__)


class SessionService(Service):
    store: SessionStore
    ttl_seconds: int

    async def open(
        self,
        query: str,
        results: list[SearchResult],
        user_id: str | None = None,
    ) -> SearchSession:
        """Store a result set under a fresh session id."""
        session = SearchSession(
            session_id=new_session_id(),
            query=query,
            user_id=user_id,
            results=results,
        )
        await self.store.put(session, self.ttl_seconds)
        logger.debug(
            "Opened session %s with %d results (ttl=%ss)",
            session.session_id,
            len(session),
            self.ttl_seconds,
        )
        return session

    async def find(self, session_id: SessionId) -> SearchSession | None:
        return await self.store.get(session_id)

    async def load(self, session_id: SessionId) -> SearchSession:
        """Fetch a session that must still exist.

        Raises:
            SessionExpiredError: If the store has no entry for the id.
        """
        session = await self.find(session_id)
        if session is None:
            logger.info("Session %s expired or unknown", session_id)
            raise SessionExpiredError()
        return session
