"""Registers the slash command definitions with the chat platform."""

import logging
from typing import Any

import httpx

from pkgsearch.config import DiscordConfig
from pkgsearch.domain.shared.error import ConfigurationError, UpstreamFetchError

logger = logging.getLogger(__name__)

# Application command option type for strings
_STRING_OPTION = 3

COMMANDS: list[dict[str, Any]] = [
    {
        "name": "packages",
        "description": "Search Sublime Text packages (supports author:name, label:name, /regex/)",
        "options": [
            {
                "name": "query",
                "description": "Search terms, filters like author:FichteFoll label:lsp, or /regex/",
                "type": _STRING_OPTION,
                "required": True,
            }
        ],
    },
    {
        "name": "stats",
        "description": "Show package database statistics",
    },
    {
        "name": "help",
        "description": "Show search syntax and examples",
    },
]


def commands_url(config: DiscordConfig) -> str:
    """Global commands route, or the guild route when a guild id is configured."""
    base = f"{config.api_base_url.rstrip('/')}/applications/{config.application_id}"
    if config.guild_id:
        return f"{base}/guilds/{config.guild_id}/commands"
    return f"{base}/commands"


class CommandRegistrar:
    """Bulk-overwrites the application's commands with ``COMMANDS``."""

    def __init__(self, client: httpx.AsyncClient, config: DiscordConfig) -> None:
        self._client = client
        self._config = config

    async def register(self) -> list[dict[str, Any]]:
        """PUT the command list and return what the platform stored.

        Raises:
            ConfigurationError: Application id or bot token missing.
            UpstreamFetchError: The platform rejected the request.
        """
        if not self._config.application_id or not self._config.token:
            raise ConfigurationError(
                "Both discord.application_id and discord.token are required to register commands"
            )

        url = commands_url(self._config)
        try:
            response = await self._client.put(
                url,
                json=COMMANDS,
                headers={"Authorization": f"Bot {self._config.token}"},
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(
                "Command registration rejected (%s): %s",
                e.response.status_code,
                e.response.text,
            )
            raise UpstreamFetchError(
                f"Command registration failed with HTTP {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            raise UpstreamFetchError(f"Command registration failed: {e}") from e

        registered = response.json()
        logger.info("Registered %d commands at %s", len(registered), url)
        return registered
