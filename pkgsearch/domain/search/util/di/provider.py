from dishka import provide

from pkgsearch.domain.search.service.search import SearchService
from pkgsearch.util.di.base import Provider
from pkgsearch.util.di.scope import Scope


class SearchProvider(Provider):
    service = provide(SearchService, scope=Scope.UOW)
