from dishka import Provider as DishkaProvider
from dishka import from_context

from pkgsearch.config import Config
from pkgsearch.util.di.scope import Scope


class Provider(DishkaProvider):
    """Base for all pkgsearch DI providers."""


class ConfigProvider(Provider):
    """Exposes the Config passed as container context."""

    config = from_context(provides=Config, scope=Scope.APP)
