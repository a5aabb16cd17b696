from pkgsearch.domain.session.model.value import (
    MenuSelection,
    NavigationCursor,
    SearchSession,
    SessionId,
    new_session_id,
)

__all__ = [
    "MenuSelection",
    "NavigationCursor",
    "SearchSession",
    "SessionId",
    "new_session_id",
]
