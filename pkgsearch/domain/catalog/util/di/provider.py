from dishka import provide

from pkgsearch.domain.catalog.service.catalog import CatalogService
from pkgsearch.util.di.base import Provider
from pkgsearch.util.di.scope import Scope


class CatalogProvider(Provider):
    service = provide(CatalogService, scope=Scope.UOW)
