"""Stats command - show catalog statistics."""

import sys

import cyclopts
from dishka import AsyncContainer

from pkgsearch.cli.console import get_console
from pkgsearch.cli.util import run_in_container
from pkgsearch.domain.catalog.service.catalog import CatalogService, CatalogStats
from pkgsearch.domain.shared.error import UpstreamFetchError

app = cyclopts.App(name="stats", help="Show package catalog statistics")


@app.default
def stats() -> None:
    """Show how many packages and libraries the catalog lists."""
    console = get_console()

    async def _stats(container: AsyncContainer) -> CatalogStats:
        service = await container.get(CatalogService)
        return await service.get_stats()

    try:
        with console.status("Fetching package catalog..."):
            result = run_in_container(_stats)
    except UpstreamFetchError as e:
        console.error(f"Could not fetch the package catalog: {e.message}")
        sys.exit(1)

    console.stats(result)
