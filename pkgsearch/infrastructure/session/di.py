"""DI provider for the session store backend."""

import logging
from collections.abc import AsyncIterable

from dishka import provide
from redis.asyncio import Redis

from pkgsearch.config import Config, SessionBackend
from pkgsearch.domain.session.port.session_store import SessionStore
from pkgsearch.infrastructure.session.memory_store import InMemorySessionStore
from pkgsearch.infrastructure.session.redis_store import RedisSessionStore
from pkgsearch.util.di.base import Provider
from pkgsearch.util.di.scope import Scope

logger = logging.getLogger(__name__)


class SessionStoreProvider(Provider):
    @provide(scope=Scope.APP)
    async def get_session_store(self, config: Config) -> AsyncIterable[SessionStore]:
        if config.session.backend is SessionBackend.REDIS:
            client = Redis.from_url(config.session.redis_url)
            logger.info("Using Redis session store")
            try:
                yield RedisSessionStore(client, key_prefix=config.session.key_prefix)
            finally:
                await client.aclose()
        else:
            logger.info("Using in-memory session store")
            yield InMemorySessionStore()
