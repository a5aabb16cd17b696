"""Redis-backed SessionStore using SETEX for expiry."""

import logging

from pydantic import ValidationError as PydanticValidationError
from redis.asyncio import Redis
from redis.exceptions import RedisError

from pkgsearch.domain.session.model.value import SearchSession, SessionId
from pkgsearch.domain.session.port.session_store import SessionStore
from pkgsearch.domain.shared.error import SessionStoreError

logger = logging.getLogger(__name__)


class RedisSessionStore(SessionStore):
    def __init__(self, client: Redis, key_prefix: str = "pkgsearch:session:") -> None:
        self._redis = client
        self._key_prefix = key_prefix

    def _key(self, session_id: str) -> str:
        return f"{self._key_prefix}{session_id}"

    async def put(self, session: SearchSession, ttl_seconds: int) -> None:
        try:
            await self._redis.setex(
                self._key(session.session_id), ttl_seconds, session.model_dump_json()
            )
        except RedisError as e:
            raise SessionStoreError(f"Could not store session: {e}") from e

    async def get(self, session_id: SessionId) -> SearchSession | None:
        try:
            data = await self._redis.get(self._key(session_id))
        except RedisError as e:
            raise SessionStoreError(f"Could not read session: {e}") from e
        if data is None:
            return None
        try:
            return SearchSession.model_validate_json(data)
        except PydanticValidationError:
            # Written by an incompatible version; treat as expired
            logger.warning("Discarding undecodable session %s", session_id)
            return None
