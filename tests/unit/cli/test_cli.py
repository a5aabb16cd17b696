"""Unit tests for CLI output."""

from pkgsearch.cli.commands import commands
from pkgsearch.cli.console import Console
from pkgsearch.domain.search.model.value import SearchFilters, SearchOutcome, SearchResult


def _outcome(*names: str) -> SearchOutcome:
    return SearchOutcome(
        filters=SearchFilters(author="sublimelsp", text_query="lsp"),
        results=[
            SearchResult(
                name=name,
                description=f"{name} description",
                authors=["sublimelsp"],
                kind="package",
                repository="repo",
                relevance_score=55,
                latest_version="1.0.0",
            )
            for name in names
        ],
    )


class TestConsoleSearchResults:
    def test_prints_table(self, capsys):
        console = Console(force_terminal=False)

        console.search_results(_outcome("LSP", "LSP-json"), show_scores=True)

        out = capsys.readouterr().out
        assert "LSP-json" in out
        assert "Filters: author:sublimelsp" in out
        assert "55" in out

    def test_no_results_warning(self, capsys):
        console = Console(force_terminal=False)

        console.search_results(_outcome())

        assert 'No packages found matching "lsp"' in capsys.readouterr().out


class TestCommandsShow:
    def test_prints_command_definitions(self, capsys):
        commands.show()

        out = capsys.readouterr().out
        assert '"name": "packages"' in out
        assert '"name": "help"' in out
