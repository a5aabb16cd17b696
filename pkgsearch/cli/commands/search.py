"""Search command: run a query against the live catalog."""

import sys

import cyclopts
from dishka import AsyncContainer

from pkgsearch.cli.console import get_console
from pkgsearch.cli.util import run_in_container
from pkgsearch.domain.search.model.value import SearchOutcome
from pkgsearch.domain.search.service.search import SearchService
from pkgsearch.domain.shared.error import UpstreamFetchError, ValidationError

app = cyclopts.App(name="search", help="Search packages and libraries")


@app.default
def search(
    *query: str,
    scores: bool = False,
    detail: bool = False,
) -> None:
    """Search the catalog the same way the /packages command does.

    Args:
        query: Search terms; supports author:NAME, label:NAME and /regex/.
        scores: Show relevance scores.
        detail: Show the top result in full.
    """
    console = get_console()
    raw_query = " ".join(query)

    async def _search(container: AsyncContainer) -> SearchOutcome:
        service = await container.get(SearchService)
        return await service.search(raw_query)

    try:
        with console.status("Fetching package catalog..."):
            outcome = run_in_container(_search)
    except ValidationError as e:
        console.error(e.message, hint='Example: pkgsearch search "author:FichteFoll lsp"')
        sys.exit(1)
    except UpstreamFetchError as e:
        console.error(f"Could not fetch the package catalog: {e.message}")
        sys.exit(1)

    console.search_results(outcome, show_scores=scores)
    if detail and outcome.results:
        console.result_detail(outcome.results[0])
