"""Catalog entries as published in the Package Control channel.

A channel snapshot is immutable once fetched, so every model here is frozen.
Entries are tagged with ``kind`` at ingestion; the feed itself carries no tag.
"""

from collections.abc import Iterator
from typing import Annotated, Literal, Union

from pydantic import ConfigDict, Field, field_validator

from pkgsearch.domain.shared.model.value import ValueObject


class _FeedModel(ValueObject):
    model_config = ConfigDict(frozen=True, extra="ignore")


def _empty_if_none(value: object) -> object:
    return [] if value is None else value


class Release(_FeedModel):
    version: str = ""
    date: str = ""  # "YYYY-MM-DD HH:MM:SS"; lexical order is chronological
    url: str | None = None
    sublime_text: str | None = None
    platforms: list[str] = []

    @field_validator("platforms", mode="before")
    @classmethod
    def _null_platforms(cls, value: object) -> object:
        return _empty_if_none(value)


def _authors(value: object) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value] if value else []
    return [str(a) for a in value if a]


class _Entry(_FeedModel):
    name: str = ""
    description: str = ""
    author: list[str] = []
    issues: str | None = None
    last_modified: str | None = None
    releases: list[Release] = []

    @field_validator("author", mode="before")
    @classmethod
    def _normalize_author(cls, value: object) -> list[str]:
        return _authors(value)

    @field_validator("name", "description", mode="before")
    @classmethod
    def _none_to_empty(cls, value: object) -> object:
        return "" if value is None else value

    @field_validator("releases", mode="before")
    @classmethod
    def _null_releases(cls, value: object) -> object:
        return _empty_if_none(value)

    def latest_release(self) -> Release | None:
        """Most recent release by date, first one in feed order on ties."""
        latest: Release | None = None
        for release in self.releases:
            if latest is None or release.date > latest.date:
                latest = release
        return latest


class Package(_Entry):
    kind: Literal["package"] = "package"
    homepage: str | None = None
    labels: list[str] = []
    previous_names: list[str] = []
    readme: str | None = None
    donate: str | None = None
    buy: str | None = None

    @field_validator("labels", "previous_names", mode="before")
    @classmethod
    def _null_lists(cls, value: object) -> object:
        return _empty_if_none(value)


class Library(_Entry):
    kind: Literal["library"] = "library"


CatalogEntry = Annotated[Union[Package, Library], Field(discriminator="kind")]


class Catalog(_FeedModel):
    """One fetched snapshot of the channel."""

    schema_version: str | None = None
    repositories: list[str] = []
    packages_cache: dict[str, list[Package]] = {}
    libraries_cache: dict[str, list[Library]] = {}

    @field_validator("repositories", mode="before")
    @classmethod
    def _null_repositories(cls, value: object) -> object:
        return _empty_if_none(value)

    @field_validator("packages_cache", "libraries_cache", mode="before")
    @classmethod
    def _drop_null_caches(cls, value: object) -> object:
        if value is None:
            return {}
        if isinstance(value, dict):
            return {repo: entries or [] for repo, entries in value.items()}
        return value

    def iter_entries(self) -> Iterator[tuple[str, Package | Library]]:
        """Yield (repository, entry); all packages first, then all libraries."""
        for repository, packages in self.packages_cache.items():
            for package in packages:
                yield repository, package
        for repository, libraries in self.libraries_cache.items():
            for library in libraries:
                yield repository, library

    def count_packages(self) -> int:
        return sum(len(packages) for packages in self.packages_cache.values())

    def count_libraries(self) -> int:
        return sum(len(libraries) for libraries in self.libraries_cache.values())
