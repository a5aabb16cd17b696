from dishka import provide

from pkgsearch.domain.interaction.service.interaction import InteractionService
from pkgsearch.util.di.base import Provider
from pkgsearch.util.di.scope import Scope


class InteractionProvider(Provider):
    service = provide(InteractionService, scope=Scope.UOW)
