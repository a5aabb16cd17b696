"""Rule-based relevance scoring.

Scores are small additive integers so that rankings stay predictable:

    exact name      100      description hit   +10
    name prefix      50      name < 20 chars    +5  (only if anything matched)
    name substring   25      author filter     +30
    no text query    20      label filter      +25

A score of 0 excludes the entry.
"""

import re

from pkgsearch.domain.catalog.model.entry import Catalog, CatalogEntry
from pkgsearch.domain.search.model.value import MAX_RESULTS, SearchFilters, SearchResult
from pkgsearch.domain.shared.error import ValidationError

SCORE_EXACT = 100
SCORE_PREFIX = 50
SCORE_SUBSTRING = 25
SCORE_DESCRIPTION = 10
SCORE_SHORT_NAME = 5
SCORE_FILTER_ONLY = 20
BONUS_AUTHOR = 30
BONUS_LABEL = 25

SHORT_NAME_LENGTH = 20

_REGEX_CHARS = re.compile(r"[.*+?^${}()|\[\]\\]")


def is_regex_query(text_query: str) -> bool:
    """Whether the text query should be treated as a regular expression."""
    if len(text_query) > 2 and text_query.startswith("/") and text_query.endswith("/"):
        return True
    return _REGEX_CHARS.search(text_query) is not None


def compile_query_pattern(text_query: str) -> re.Pattern[str]:
    """Compile a regex query case-insensitively, stripping one pair of slashes.

    Raises:
        ValidationError: If the pattern does not compile.
    """
    pattern = text_query
    if pattern.startswith("/"):
        pattern = pattern[1:]
    if pattern.endswith("/"):
        pattern = pattern[:-1]
    try:
        return re.compile(pattern, re.IGNORECASE)
    except re.error as e:
        raise ValidationError(
            f"Invalid regex pattern: {text_query}", field="query"
        ) from e


def matches_filters(entry: CatalogEntry, filters: SearchFilters) -> bool:
    """Filter gate: case-insensitive substring match on authors and labels."""
    if filters.author is not None:
        needle = filters.author.lower()
        if not any(needle in author.lower() for author in entry.author):
            return False

    if filters.label is not None:
        if entry.kind != "package":
            return False
        needle = filters.label.lower()
        if not any(needle in label.lower() for label in entry.labels):
            return False

    return True


def score_text(
    name: str,
    description: str,
    text_query: str,
    pattern: re.Pattern[str] | None = None,
) -> int:
    """Score name/description against a plain text query or compiled pattern."""
    if not name or not description or not text_query:
        return 0

    score = 0
    if pattern is not None:
        match = pattern.search(name)
        if match is not None:
            matched = match.group(0)
            if matched == name:
                score += SCORE_EXACT
            elif name.lower().startswith(matched.lower()):
                score += SCORE_PREFIX
            else:
                score += SCORE_SUBSTRING
        if pattern.search(description) is not None:
            score += SCORE_DESCRIPTION
    else:
        name_lower = name.lower()
        query_lower = text_query.lower()
        if name_lower == query_lower:
            score += SCORE_EXACT
        elif name_lower.startswith(query_lower):
            score += SCORE_PREFIX
        elif query_lower in name_lower:
            score += SCORE_SUBSTRING
        if query_lower in description.lower():
            score += SCORE_DESCRIPTION

    if score > 0 and len(name) < SHORT_NAME_LENGTH:
        score += SCORE_SHORT_NAME

    return score


def score_entry(
    entry: CatalogEntry,
    filters: SearchFilters,
    pattern: re.Pattern[str] | None = None,
) -> int:
    """Total relevance of one entry; 0 when rejected by the gate."""
    if not entry.name or not entry.description:
        return 0
    if not matches_filters(entry, filters):
        return 0

    if filters.text_query:
        score = score_text(entry.name, entry.description, filters.text_query, pattern)
    else:
        score = SCORE_FILTER_ONLY

    if filters.author is not None:
        score += BONUS_AUTHOR
    if filters.label is not None:
        score += BONUS_LABEL
    return score


def _to_result(repository: str, entry: CatalogEntry, score: int) -> SearchResult:
    latest = entry.latest_release()
    return SearchResult(
        name=entry.name,
        description=entry.description,
        authors=entry.author,
        kind=entry.kind,
        repository=repository,
        relevance_score=score,
        labels=getattr(entry, "labels", []),
        latest_version=latest.version if latest else None,
        homepage=getattr(entry, "homepage", None),
        issues=entry.issues,
        last_modified=entry.last_modified,
    )


def rank(
    filters: SearchFilters,
    catalog: Catalog,
    limit: int = MAX_RESULTS,
) -> list[SearchResult]:
    """Rank catalog entries by descending score, stable on catalog order.

    Raises:
        ValidationError: If the text query is a regex that does not compile.
    """
    pattern = None
    if filters.text_query and is_regex_query(filters.text_query):
        pattern = compile_query_pattern(filters.text_query)

    results: list[SearchResult] = []
    for repository, entry in catalog.iter_entries():
        score = score_entry(entry, filters, pattern)
        if score > 0:
            results.append(_to_result(repository, entry, score))

    # sorted() is stable, ties keep catalog order
    results = sorted(results, key=lambda r: r.relevance_score, reverse=True)
    return results[:limit]
