"""Slash command management."""

import json
import sys

import cyclopts
from dishka import AsyncContainer

from pkgsearch.cli.console import get_console
from pkgsearch.cli.util import run_in_container
from pkgsearch.domain.shared.error import ConfigurationError, UpstreamFetchError
from pkgsearch.infrastructure.discord.command_registrar import COMMANDS, CommandRegistrar

app = cyclopts.App(name="commands", help="Manage the bot's slash commands")


@app.command
def register() -> None:
    """Register /packages, /stats and /help with the chat platform.

    Uses PKGSEARCH_DISCORD__APPLICATION_ID and PKGSEARCH_DISCORD__TOKEN; set
    PKGSEARCH_DISCORD__GUILD_ID to register to a single guild for testing.
    """
    console = get_console()

    async def _register(container: AsyncContainer) -> list[dict]:
        registrar = await container.get(CommandRegistrar)
        return await registrar.register()

    try:
        registered = run_in_container(_register)
    except ConfigurationError as e:
        console.error(e.message)
        sys.exit(1)
    except UpstreamFetchError as e:
        console.error(e.message)
        sys.exit(1)

    for command in registered:
        console.success(f"/{command.get('name')}")


@app.command
def show() -> None:
    """Print the command definitions that would be registered."""
    get_console().print(json.dumps(COMMANDS, indent=2))
