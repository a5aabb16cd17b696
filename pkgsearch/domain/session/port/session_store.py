"""Port for the short-lived search session store."""

from abc import abstractmethod
from typing import Protocol

from pkgsearch.domain.session.model.value import SearchSession, SessionId
from pkgsearch.domain.shared.port import Port


class SessionStore(Port, Protocol):
    """Key-value store with per-key TTL.

    ``put`` replaces any previous value for the id. ``get`` returns None when
    the key expired or never existed; that is a normal outcome, not an error.
    Implementations raise SessionStoreError when the backend is unreachable.
    """

    @abstractmethod
    async def put(self, session: SearchSession, ttl_seconds: int) -> None: ...

    @abstractmethod
    async def get(self, session_id: SessionId) -> SearchSession | None: ...
