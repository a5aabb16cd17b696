from pkgsearch.util.di.base import ConfigProvider, Provider
from pkgsearch.util.di.scope import Scope

__all__ = ["ConfigProvider", "Provider", "Scope"]
