"""Interaction state machine.

States (never stored; rebuilt from the inbound event and the session store):

    Idle --/packages--> ItemDetail(0) --Previous/Next--> ItemDetail(i +/- 1)
                             |                                 |
                             +--All Packages--> ListOverview --pick--> ItemDetail(i)

A missing session or undecodable handle on any component event drops the
user back to Idle with the expired-results message.
"""

import logging

import logfire

from pkgsearch.domain.catalog.service.catalog import CatalogService
from pkgsearch.domain.interaction.model.component import ActionRow
from pkgsearch.domain.interaction.model.envelope import (
    Embed,
    Interaction,
    InteractionResponse,
    InteractionType,
    MessageData,
    ResponseType,
    ephemeral,
    pong,
)
from pkgsearch.domain.interaction.util import views
from pkgsearch.domain.search.model.value import SearchFilters
from pkgsearch.domain.search.service.search import SearchService
from pkgsearch.domain.search.util.query_parser import parse_query
from pkgsearch.domain.search.util.relevance import is_regex_query
from pkgsearch.domain.session.model.handle import (
    HandleAction,
    decode_cursor,
    decode_select_handle,
    decode_selection,
    parse_action,
)
from pkgsearch.domain.session.model.value import NavigationCursor, SearchSession
from pkgsearch.domain.session.service.session import SessionService
from pkgsearch.domain.shared.error import (
    CursorOutOfRangeError,
    InfrastructureError,
    InvalidHandleError,
    SessionExpiredError,
    UnknownInteractionError,
    UpstreamFetchError,
    ValidationError,
)
from pkgsearch.domain.shared.service import Service

logger = logging.getLogger(__name__)

_STEPS = {HandleAction.PREVIOUS: -1, HandleAction.NEXT: 1}


def _message(
    response_type: ResponseType,
    *,
    content: str | None = None,
    embeds: list[Embed] | None = None,
    components: list[ActionRow] | None = None,
) -> InteractionResponse:
    return InteractionResponse(
        type=response_type,
        data=MessageData(content=content, embeds=embeds, components=components),
    )


def expired() -> InteractionResponse:
    """In-place update telling the user to search again; removes all components."""
    return _message(
        ResponseType.UPDATE_MESSAGE,
        content=views.EXPIRED_MESSAGE,
        embeds=[],
        components=[],
    )


def _session_filters(session: SearchSession) -> tuple[SearchFilters, bool]:
    filters = parse_query(session.query)
    return filters, bool(filters.text_query) and is_regex_query(filters.text_query)


def item_detail(
    session: SearchSession,
    index: int,
    response_type: ResponseType = ResponseType.UPDATE_MESSAGE,
) -> InteractionResponse:
    """ItemDetail(index) with navigation affordances."""
    result = session.result_at(index)
    filters, is_regex = _session_filters(session)
    cursor = NavigationCursor(session_id=session.session_id, index=index)
    return _message(
        response_type,
        embeds=[
            views.result_embed(
                result,
                filters=filters,
                is_regex=is_regex,
                position=index,
                total=len(session),
            )
        ],
        components=[views.navigation_row(cursor, len(session))],
    )


def list_overview(session: SearchSession) -> InteractionResponse:
    return _message(
        ResponseType.UPDATE_MESSAGE,
        embeds=[views.overview_embed(session)],
        components=[views.picker_row(session)],
    )


class InteractionService(Service):
    """Handles one inbound interaction. Constructed per request."""

    search_service: SearchService
    catalog_service: CatalogService
    session_service: SessionService

    async def handle(self, interaction: Interaction) -> InteractionResponse:
        """Dispatch an interaction; always returns a well-formed response."""
        try:
            with logfire.span("HandleInteraction", interaction_type=interaction.type):
                return await self._dispatch(interaction)
        except UnknownInteractionError as e:
            logger.warning("Unknown interaction: %s", e.message)
            return ephemeral(e.message)
        except Exception:
            logger.exception("Unhandled error for interaction type %s", interaction.type)
            return ephemeral(views.GENERIC_FAILURE_MESSAGE)

    async def _dispatch(self, interaction: Interaction) -> InteractionResponse:
        if interaction.type == InteractionType.PING:
            return pong()
        if interaction.type == InteractionType.APPLICATION_COMMAND:
            return await self._handle_command(interaction)
        if interaction.type == InteractionType.MESSAGE_COMPONENT:
            return await self._handle_component(interaction)
        raise UnknownInteractionError(views.UNKNOWN_COMMAND_MESSAGE)

    # -------------------------------------------------------------------------
    # Commands
    # -------------------------------------------------------------------------

    async def _handle_command(self, interaction: Interaction) -> InteractionResponse:
        name = interaction.data.name if interaction.data else None
        if name == "packages":
            return await self.search(interaction.option("query"), interaction.user_id)
        if name == "stats":
            return await self.stats()
        if name == "help":
            return _message(ResponseType.CHANNEL_MESSAGE, embeds=[views.help_embed()])
        raise UnknownInteractionError(views.UNKNOWN_COMMAND_MESSAGE)

    async def search(self, query: object, user_id: str | None = None) -> InteractionResponse:
        """Initial search: no results, a single result, or a paginated session."""
        raw_query = query if isinstance(query, str) else None
        try:
            outcome = await self.search_service.search(raw_query)
        except ValidationError as e:
            return ephemeral(e.message)
        except UpstreamFetchError as e:
            logger.error("Catalog fetch failed: %s", e.message)
            return ephemeral(views.UPSTREAM_FAILURE_MESSAGE)

        results = outcome.results
        if not results:
            return _message(
                ResponseType.CHANNEL_MESSAGE,
                embeds=[views.no_results_embed(outcome.filters, outcome.is_regex)],
            )

        if len(results) == 1:
            return _message(
                ResponseType.CHANNEL_MESSAGE,
                embeds=[
                    views.result_embed(
                        results[0], filters=outcome.filters, is_regex=outcome.is_regex
                    )
                ],
            )

        try:
            session = await self.session_service.open(
                (raw_query or "").strip(),
                results,
                user_id,
            )
        except InfrastructureError as e:
            logger.error("Could not store search session: %s", e.message)
            return ephemeral(views.UPSTREAM_FAILURE_MESSAGE)
        return item_detail(session, 0, ResponseType.CHANNEL_MESSAGE)

    async def stats(self) -> InteractionResponse:
        try:
            stats = await self.catalog_service.get_stats()
        except UpstreamFetchError as e:
            logger.error("Catalog fetch failed: %s", e.message)
            return ephemeral(views.STATS_FAILURE_MESSAGE)
        return _message(ResponseType.CHANNEL_MESSAGE, embeds=[views.stats_embed(stats)])

    # -------------------------------------------------------------------------
    # Components
    # -------------------------------------------------------------------------

    async def _handle_component(self, interaction: Interaction) -> InteractionResponse:
        data = interaction.data
        custom_id = data.custom_id if data else None
        if not custom_id:
            raise UnknownInteractionError(views.UNKNOWN_COMPONENT_MESSAGE)
        try:
            action = parse_action(custom_id)
        except InvalidHandleError:
            raise UnknownInteractionError(views.UNKNOWN_COMPONENT_MESSAGE) from None

        try:
            if action is HandleAction.SELECT:
                return await self.select(custom_id, data.values if data else [])
            if action is HandleAction.LIST:
                return await self.show_list(custom_id)
            return await self.navigate(custom_id)
        except (SessionExpiredError, InvalidHandleError) as e:
            logger.info("Component %s: %s", custom_id, e.message)
            return expired()
        except CursorOutOfRangeError as e:
            # Buttons are disabled at the boundaries, so this is a bug or a forged handle
            logger.error("Navigation out of range for %s: %s", custom_id, e.message)
            return expired()
        except InfrastructureError as e:
            logger.error("Session store failure for %s: %s", custom_id, e.message)
            return ephemeral(views.UPSTREAM_FAILURE_MESSAGE)

    async def navigate(self, custom_id: str) -> InteractionResponse:
        """Previous/Next: step the cursor by one and re-render.

        Raises:
            InvalidHandleError: Malformed handle.
            SessionExpiredError: Session missing from the store.
            CursorOutOfRangeError: Step would leave the result range.
        """
        action, cursor = decode_cursor(custom_id)
        if action not in _STEPS:
            raise InvalidHandleError(custom_id)
        session = await self.session_service.load(cursor.session_id)
        moved = cursor.step(_STEPS[action], len(session))
        return item_detail(session, moved.index)

    async def show_list(self, custom_id: str) -> InteractionResponse:
        _, cursor = decode_cursor(custom_id)
        session = await self.session_service.load(cursor.session_id)
        return list_overview(session)

    async def select(self, custom_id: str, values: list[str]) -> InteractionResponse:
        """Picker choice: jump to the chosen result.

        The session entry at the chosen index must still start with the
        encoded name and repository, which may have been truncated.
        """
        session_id = decode_select_handle(custom_id)
        if len(values) != 1:
            raise InvalidHandleError(custom_id)
        selection = decode_selection(values[0])
        session = await self.session_service.load(session_id)
        if selection.index >= len(session):
            raise SessionExpiredError("Selected index no longer in session")
        result = session.results[selection.index]
        if not result.name.startswith(selection.name) or not result.repository.startswith(
            selection.repository
        ):
            raise SessionExpiredError("Selected entry no longer matches session")
        return item_detail(session, selection.index)
