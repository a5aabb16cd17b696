"""Unit tests for CommandRegistrar."""

from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from pkgsearch.config import DiscordConfig
from pkgsearch.domain.shared.error import ConfigurationError, UpstreamFetchError
from pkgsearch.infrastructure.discord.command_registrar import (
    COMMANDS,
    CommandRegistrar,
    commands_url,
)


@pytest.fixture
def config() -> DiscordConfig:
    return DiscordConfig(application_id="123", token="secret")


class TestCommandsUrl:
    def test_global(self, config: DiscordConfig):
        assert commands_url(config) == "https://discord.com/api/v10/applications/123/commands"

    def test_guild(self):
        config = DiscordConfig(application_id="123", guild_id="456")

        assert (
            commands_url(config)
            == "https://discord.com/api/v10/applications/123/guilds/456/commands"
        )


class TestCommandDefinitions:
    def test_command_names(self):
        assert [c["name"] for c in COMMANDS] == ["packages", "stats", "help"]

    def test_packages_requires_query(self):
        (option,) = COMMANDS[0]["options"]

        assert option["name"] == "query"
        assert option["required"] is True


class TestCommandRegistrar:
    @pytest.mark.asyncio
    async def test_register_puts_commands(self, config: DiscordConfig):
        response = MagicMock(spec=httpx.Response)
        response.raise_for_status = MagicMock()
        response.json.return_value = [{"name": c["name"]} for c in COMMANDS]
        client = AsyncMock(spec=httpx.AsyncClient)
        client.put.return_value = response

        registered = await CommandRegistrar(client=client, config=config).register()

        assert len(registered) == 3
        client.put.assert_called_once_with(
            "https://discord.com/api/v10/applications/123/commands",
            json=COMMANDS,
            headers={"Authorization": "Bot secret"},
        )

    @pytest.mark.asyncio
    async def test_requires_credentials(self):
        client = AsyncMock(spec=httpx.AsyncClient)

        with pytest.raises(ConfigurationError):
            await CommandRegistrar(client=client, config=DiscordConfig()).register()

        client.put.assert_not_called()

    @pytest.mark.asyncio
    async def test_rejected_registration(self, config: DiscordConfig):
        response = MagicMock(spec=httpx.Response)
        response.raise_for_status.side_effect = httpx.HTTPStatusError(
            "Unauthorized",
            request=MagicMock(),
            response=MagicMock(status_code=401, text="401: Unauthorized"),
        )
        client = AsyncMock(spec=httpx.AsyncClient)
        client.put.return_value = response

        with pytest.raises(UpstreamFetchError, match="HTTP 401"):
            await CommandRegistrar(client=client, config=config).register()
