"""Builders for the embeds and components the bot sends back."""

from datetime import UTC, datetime

from pkgsearch.domain.catalog.service.catalog import CatalogStats
from pkgsearch.domain.interaction.model.component import (
    ActionRow,
    Button,
    ButtonStyle,
    SelectMenu,
    SelectOption,
)
from pkgsearch.domain.interaction.model.envelope import (
    Embed,
    EmbedAuthor,
    EmbedField,
    EmbedFooter,
)
from pkgsearch.domain.search.model.value import SearchFilters, SearchResult
from pkgsearch.domain.session.model.handle import (
    HandleAction,
    encode_cursor,
    encode_select_handle,
    encode_selection,
)
from pkgsearch.domain.session.model.value import (
    MenuSelection,
    NavigationCursor,
    SearchSession,
)

COLOR_RESULT = 0x3498DB
COLOR_EMPTY = 0xE74C3C
COLOR_HELP = 0x9B59B6

PACKAGE_URL = "https://packages.sublimetext.io/packages/{name}/"
ICON_URL = "https://packages.sublimetext.io/static/logo.webp"
FOOTER = "Package Control Search"

OVERVIEW_SUMMARY_SIZE = 5
PICKER_SIZE = 25

EXPIRED_MESSAGE = "⏰ Search results expired. Please search again with `/packages`."
UPSTREAM_FAILURE_MESSAGE = "Failed to fetch package data. Please try again later."
STATS_FAILURE_MESSAGE = "An error occurred while fetching statistics."
GENERIC_FAILURE_MESSAGE = "Something went wrong while handling this interaction."
UNKNOWN_COMMAND_MESSAGE = "Unknown command."
UNKNOWN_COMPONENT_MESSAGE = "This button is no longer supported."


def _now() -> str:
    return datetime.now(UTC).isoformat()


def _timestamp(value: str | None) -> str:
    """Normalize feed timestamps ("2024-01-31 10:00:00") to ISO 8601."""
    if value:
        try:
            parsed = datetime.fromisoformat(value)
        except ValueError:
            pass
        else:
            if parsed.tzinfo is None:
                parsed = parsed.replace(tzinfo=UTC)
            return parsed.isoformat()
    return _now()


def _truncate(text: str, limit: int) -> str:
    return text if len(text) <= limit else text[: limit - 1] + "…"


def _filter_text(filters: SearchFilters) -> str:
    if not filters.has_filters:
        return ""
    parts = []
    if filters.author is not None:
        parts.append(f"**Author:** {filters.author}")
    if filters.label is not None:
        parts.append(f"**Label:** {filters.label}")
    return f"**Active Filters:** {', '.join(parts)}"


def authors_text(result: SearchResult) -> str:
    return ", ".join(result.authors) or "Unknown"


def result_embed(
    result: SearchResult,
    *,
    filters: SearchFilters | None = None,
    is_regex: bool = False,
    position: int | None = None,
    total: int | None = None,
) -> Embed:
    """Detail view of a single result."""
    description = result.description or "No description available"
    filter_text = _filter_text(filters) if filters else ""
    if filter_text:
        description = f"{filter_text}\n\n{description}"

    fields: list[EmbedField] = []
    if result.latest_version:
        fields.append(EmbedField(name="Latest Version", value=result.latest_version))
    if result.labels:
        fields.append(EmbedField(name="Labels", value=", ".join(result.labels)))
    if result.homepage:
        fields.append(EmbedField(name="Repository", value=result.homepage, inline=True))
    if result.issues:
        fields.append(EmbedField(name="Issues", value=result.issues, inline=True))

    footer = "Regex search - Package updated at" if is_regex else "Package updated at"
    if position is not None and total is not None:
        footer = f"Result {position + 1} of {total} • {footer}"

    return Embed(
        description=_truncate(description, 4096),
        color=COLOR_RESULT,
        fields=fields,
        author=EmbedAuthor(
            name=_truncate(f"{result.name} by {authors_text(result)}", 256),
            url=result.homepage or PACKAGE_URL.format(name=result.name),
            icon_url=ICON_URL,
        ),
        footer=EmbedFooter(text=footer),
        timestamp=_timestamp(result.last_modified),
    )


def navigation_row(cursor: NavigationCursor, total: int) -> ActionRow:
    """Previous / Next / All Packages buttons for the given position.

    Previous is disabled exactly at index 0 and Next exactly at the last index.
    """
    return ActionRow(
        components=[
            Button(
                label="◀ Previous",
                custom_id=encode_cursor(HandleAction.PREVIOUS, cursor),
                disabled=cursor.index == 0,
            ),
            Button(
                label="Next ▶",
                custom_id=encode_cursor(HandleAction.NEXT, cursor),
                disabled=cursor.index >= total - 1,
            ),
            Button(
                label="All Packages",
                style=ButtonStyle.PRIMARY,
                custom_id=encode_cursor(HandleAction.LIST, cursor),
            ),
        ]
    )


def no_results_embed(filters: SearchFilters, is_regex: bool) -> Embed:
    search_type = "regex pattern" if is_regex else "query"
    query_text = filters.text_query or "filter-only search"
    filter_text = _filter_text(filters)
    if filter_text:
        filter_text = f"\n{filter_text}"
    return Embed(
        title="🔍 No Results",
        color=COLOR_EMPTY,
        description=(
            f'No packages found matching {search_type} "{query_text}"{filter_text}\n\n'
            "Try:\n"
            "• Different search terms\n"
            "• `author:username` to filter by author\n"
            "• `label:labelname` to filter by label\n"
            "• Combine filters: `author:FichteFoll label:snippets Package`"
        ),
        footer=EmbedFooter(text=FOOTER),
        timestamp=_now(),
    )


def overview_embed(session: SearchSession) -> Embed:
    """Textual summary of the top results."""
    lines = []
    for i, result in enumerate(session.results[:OVERVIEW_SUMMARY_SIZE], 1):
        url = result.homepage or PACKAGE_URL.format(name=result.name)
        lines.append(
            f"**{i}. [{result.name}]({url})** by {authors_text(result)}\n"
            f"{_truncate(result.description, 120)}"
        )
    remaining = len(session) - OVERVIEW_SUMMARY_SIZE
    if remaining > 0:
        lines.append(f"…and {remaining} more. Pick one below.")
    return Embed(
        title=_truncate(f'📦 Results for "{session.query}"', 256),
        color=COLOR_RESULT,
        description="\n\n".join(lines),
        footer=EmbedFooter(text=f"{len(session)} results • {FOOTER}"),
        timestamp=_now(),
    )


def picker_row(session: SearchSession) -> ActionRow:
    """Select menu over the session results."""
    options = []
    for index, result in enumerate(session.results[:PICKER_SIZE]):
        value = encode_selection(
            MenuSelection(name=result.name, repository=result.repository, index=index)
        )
        options.append(
            SelectOption(
                label=_truncate(f"{index + 1}. {result.name}", 100),
                value=value,
                description=_truncate(result.description, 100) or None,
            )
        )
    return ActionRow(
        components=[
            SelectMenu(
                custom_id=encode_select_handle(session.session_id),
                placeholder="Choose a package",
                options=options,
            )
        ]
    )


def help_embed() -> Embed:
    return Embed(
        title="📖 Package Control Search Help",
        color=COLOR_HELP,
        description=(
            "Search through Sublime Text packages and libraries with powerful "
            "filters and queries."
        ),
        fields=[
            EmbedField(
                name="🔍 Basic Search",
                value="`/packages LSP` - Search for packages containing 'LSP'",
                inline=False,
            ),
            EmbedField(
                name="👤 Author Filter",
                value=(
                    "`/packages author:FichteFoll` - Find packages by specific author\n"
                    "`/packages author:FichteFoll Package` - Combine with text search"
                ),
                inline=False,
            ),
            EmbedField(
                name="🏷️ Label Filter",
                value=(
                    "`/packages label:snippets` - Find packages with specific label\n"
                    "`/packages label:lsp completion` - Combine with text search"
                ),
                inline=False,
            ),
            EmbedField(
                name="🔧 Advanced Search",
                value="`/packages author:FichteFoll label:syntax theme` - Multiple filters + text",
                inline=False,
            ),
            EmbedField(
                name="🔀 Regex Search",
                value="`/packages /^LSP/` - Use regex patterns (wrap in forward slashes)",
                inline=False,
            ),
            EmbedField(
                name="📊 Other Commands",
                value="`/stats` - View package database statistics",
                inline=False,
            ),
        ],
        footer=EmbedFooter(text=f"{FOOTER} • Case-insensitive matching"),
        timestamp=_now(),
    )


def stats_embed(stats: CatalogStats) -> Embed:
    return Embed(
        title="📊 Sublime Text Package Database Stats",
        color=COLOR_RESULT,
        fields=[
            EmbedField(name="📦 Total Packages", value=f"{stats.packages:,}", inline=True),
            EmbedField(name="📚 Total Libraries", value=f"{stats.libraries:,}", inline=True),
            EmbedField(
                name="🔍 Search Command",
                value="Use `/packages {query}` to search",
                inline=False,
            ),
        ],
        footer=EmbedFooter(text="Data from Package Control"),
        timestamp=_now(),
    )
