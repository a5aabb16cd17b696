"""Helpers for running container-backed commands from the CLI."""

import asyncio
from collections.abc import Awaitable, Callable
from typing import TypeVar

from dishka import AsyncContainer

from pkgsearch.application.di import create_container
from pkgsearch.config import Config, configure_logging
from pkgsearch.util.di.scope import Scope

T = TypeVar("T")


def run_in_container(fn: Callable[[AsyncContainer], Awaitable[T]]) -> T:
    """Build a container, run ``fn`` inside one UOW scope, then close everything."""
    config = Config()
    configure_logging(config.logging)

    async def _run() -> T:
        container = create_container(config)
        try:
            async with container(scope=Scope.UOW) as uow:
                return await fn(uow)
        finally:
            await container.close()

    return asyncio.run(_run())
