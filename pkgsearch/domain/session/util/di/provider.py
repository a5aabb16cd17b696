from dishka import provide

from pkgsearch.config import Config
from pkgsearch.domain.session.port.session_store import SessionStore
from pkgsearch.domain.session.service.session import SessionService
from pkgsearch.util.di.base import Provider
from pkgsearch.util.di.scope import Scope


class SessionProvider(Provider):
    @provide(scope=Scope.UOW)
    def get_session_service(self, store: SessionStore, config: Config) -> SessionService:
        return SessionService(store=store, ttl_seconds=config.session.ttl_seconds)
