"""Global test fixtures."""

import os

import logfire
import pytest

from pkgsearch.domain.catalog.model.entry import Catalog, Library, Package, Release

# Keep tests independent of any local .env or YAML config
os.environ.pop("PKGSEARCH_CONFIG_FILE", None)
os.environ.pop("PKGSEARCH_LOG_FILE", None)

# Must happen before pkgsearch.application.api.rest.app is imported
logfire.configure(send_to_logfire=False, console=False)


@pytest.fixture
def catalog() -> Catalog:
    """A small channel snapshot covering packages, libraries and filters."""
    return Catalog(
        packages_cache={
            "https://example.com/repo-a.json": [
                Package(
                    name="LSP",
                    description="Language Server Protocol client",
                    author=["sublimelsp"],
                    labels=["lsp", "language server"],
                    homepage="https://github.com/sublimelsp/LSP",
                    releases=[
                        Release(version="1.0.0", date="2023-01-01 00:00:00"),
                        Release(version="2.0.0", date="2024-06-01 00:00:00"),
                    ],
                ),
                Package(
                    name="LSP-json",
                    description="JSON support for LSP",
                    author=["sublimelsp"],
                    labels=["lsp", "json"],
                ),
                Package(
                    name="PackageDev",
                    description="Tools to ease the creation of snippets and syntax definitions",
                    author=["FichteFoll", "kingkeith"],
                    labels=["snippets", "language syntax"],
                ),
            ],
            "https://example.com/repo-b.json": [
                Package(
                    name="A File Icon",
                    description="Sublime Text File-Specific Icons",
                    author=["ihodev", "deathaxe"],
                    labels=["icons", "theme"],
                ),
                Package(name="Nameless", description="", author=["nobody"]),
            ],
        },
        libraries_cache={
            "https://example.com/libs.json": [
                Library(
                    name="lsp_utils",
                    description="Utilities for LSP packages",
                    author=["sublimelsp"],
                ),
            ],
        },
    )
