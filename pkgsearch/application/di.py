from dishka import AsyncContainer, make_async_container

from pkgsearch.config import Config
from pkgsearch.domain.catalog.util.di import CatalogProvider
from pkgsearch.domain.interaction.util.di import InteractionProvider
from pkgsearch.domain.search.util.di import SearchProvider
from pkgsearch.domain.session.util.di import SessionProvider
from pkgsearch.infrastructure.discord.di import DiscordProvider
from pkgsearch.infrastructure.http.di import HttpProvider
from pkgsearch.infrastructure.session.di import SessionStoreProvider
from pkgsearch.util.di import ConfigProvider
from pkgsearch.util.di.scope import Scope


def create_container(config: Config | None = None) -> AsyncContainer:
    # Pydantic Settings populates from env vars at runtime
    config = config or Config()

    return make_async_container(
        ConfigProvider(),
        HttpProvider(),
        SessionStoreProvider(),
        DiscordProvider(),
        CatalogProvider(),
        SearchProvider(),
        SessionProvider(),
        InteractionProvider(),
        context={Config: config},
        scopes=Scope,  # type: ignore[arg-type]  # Custom scope class
    )
