"""Query parsing: ``author:`` / ``label:`` filter tokens plus free text.

    >>> parse_query("author:FichteFoll label:snippets Package")
    SearchFilters(author='FichteFoll', label='snippets', text_query='Package')

Rules:
- A filter token is ``key:value`` at the start of a whitespace-delimited word,
  with an alphanumeric key and a non-empty, non-whitespace value.
- Keys are matched case-insensitively; only ``author`` and ``label`` are
  recognized. Tokens with any other key stay in the text query verbatim,
  so ``lang:python`` searches for the literal text ``lang:python``.
- The last occurrence of a repeated key wins.
- Values cannot contain whitespace and there is no escaping.
"""

import re

from pkgsearch.domain.search.model.value import SearchFilters

# Token must begin a word, so "/^author:x/" is left for regex matching
FILTER_TOKEN = re.compile(r"(?<!\S)([A-Za-z0-9]+):(\S+)")

FILTER_KEYS = frozenset({"author", "label"})


def parse_query(raw: str) -> SearchFilters:
    """Split a raw query into SearchFilters."""
    values: dict[str, str] = {}

    def _consume(match: re.Match[str]) -> str:
        key = match.group(1).lower()
        if key not in FILTER_KEYS:
            return match.group(0)
        values[key] = match.group(2)
        return " "

    remainder = FILTER_TOKEN.sub(_consume, raw)

    return SearchFilters(
        author=values.get("author"),
        label=values.get("label"),
        text_query=" ".join(remainder.split()),
    )
