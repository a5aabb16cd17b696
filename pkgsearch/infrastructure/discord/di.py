"""DI provider for chat platform adapters."""

from collections.abc import AsyncIterable
from typing import NewType

import httpx
from dishka import provide

from pkgsearch.config import Config
from pkgsearch.domain.interaction.port.signature_verifier import SignatureVerifier
from pkgsearch.infrastructure.discord.command_registrar import CommandRegistrar
from pkgsearch.infrastructure.discord.signature import (
    AllowAllSignatureVerifier,
    Ed25519SignatureVerifier,
)
from pkgsearch.util.di.base import Provider
from pkgsearch.util.di.scope import Scope

DiscordHttpClient = NewType("DiscordHttpClient", httpx.AsyncClient)


class DiscordProvider(Provider):
    @provide(scope=Scope.APP)
    def get_signature_verifier(self, config: Config) -> SignatureVerifier:
        if config.discord.public_key:
            return Ed25519SignatureVerifier(config.discord.public_key)
        return AllowAllSignatureVerifier()

    @provide(scope=Scope.APP)
    async def get_discord_http_client(self) -> AsyncIterable[DiscordHttpClient]:
        async with httpx.AsyncClient(timeout=httpx.Timeout(10.0)) as client:
            yield DiscordHttpClient(client)

    @provide(scope=Scope.APP)
    def get_command_registrar(
        self, client: DiscordHttpClient, config: Config
    ) -> CommandRegistrar:
        return CommandRegistrar(client=client, config=config.discord)
