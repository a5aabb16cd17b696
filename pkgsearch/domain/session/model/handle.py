"""Encoding of session state into component handles (``custom_id`` strings).

Handle formats:

    prev_package_{session_id}_{index}      Previous button
    next_package_{session_id}_{index}      Next button
    package_list_{session_id}_{index}      "All Packages" button
    package_select_{session_id}            result picker (select menu)
    {name}|{repository}|{index}            picker option value

Cursor handles are split at the *last* underscore, so the index never
contains one and a session id may contain underscores freely. Handles and
option values are limited to 100 characters by the chat platform.
"""

from enum import StrEnum

from pkgsearch.domain.session.model.value import MenuSelection, NavigationCursor, SessionId
from pkgsearch.domain.shared.error import InvalidHandleError

MAX_HANDLE_LENGTH = 100

OPTION_SEPARATOR = "|"


def _is_index(text: str) -> bool:
    return text.isascii() and text.isdigit()


class HandleAction(StrEnum):
    PREVIOUS = "prev_package_"
    NEXT = "next_package_"
    LIST = "package_list_"
    SELECT = "package_select_"


def parse_action(handle: str) -> HandleAction:
    """Identify which component a handle belongs to.

    Raises:
        InvalidHandleError: If no known prefix matches.
    """
    for action in HandleAction:
        if handle.startswith(action.value):
            return action
    raise InvalidHandleError(handle)


def encode_cursor(action: HandleAction, cursor: NavigationCursor) -> str:
    if action is HandleAction.SELECT:
        raise ValueError("Select menus carry a session handle, not a cursor")
    handle = f"{action.value}{cursor.session_id}_{cursor.index}"
    if len(handle) > MAX_HANDLE_LENGTH:
        raise ValueError(f"Handle exceeds {MAX_HANDLE_LENGTH} characters: {handle}")
    return handle


def decode_cursor(handle: str) -> tuple[HandleAction, NavigationCursor]:
    """Split a button handle into its action and cursor.

    Raises:
        InvalidHandleError: On unknown prefix, missing session id or non-numeric index.
    """
    action = parse_action(handle)
    if action is HandleAction.SELECT:
        raise InvalidHandleError(handle)

    session_id, sep, index = handle[len(action.value) :].rpartition("_")
    if not sep or not session_id or not _is_index(index):
        raise InvalidHandleError(handle)
    return action, NavigationCursor(session_id=SessionId(session_id), index=int(index))


def encode_select_handle(session_id: SessionId) -> str:
    return f"{HandleAction.SELECT.value}{session_id}"


def decode_select_handle(handle: str) -> SessionId:
    """Extract the session id from a picker handle.

    Raises:
        InvalidHandleError: If the handle is not a picker handle.
    """
    if parse_action(handle) is not HandleAction.SELECT:
        raise InvalidHandleError(handle)
    session_id = handle[len(HandleAction.SELECT.value) :]
    if not session_id:
        raise InvalidHandleError(handle)
    return SessionId(session_id)


def encode_selection(selection: MenuSelection) -> str:
    """Encode a picker option, truncating name and repository to fit the length limit.

    The name keeps priority; the repository gets whatever room is left.
    """
    suffix = f"{OPTION_SEPARATOR}{selection.index}"
    name = selection.name[: MAX_HANDLE_LENGTH - len(suffix) - len(OPTION_SEPARATOR)]
    head = f"{name}{OPTION_SEPARATOR}"
    room = MAX_HANDLE_LENGTH - len(head) - len(suffix)
    return f"{head}{selection.repository[:room]}{suffix}"


def decode_selection(value: str) -> MenuSelection:
    """Decode a picker option value.

    The name and repository parts may have been truncated by ``encode_selection``.

    Raises:
        InvalidHandleError: If the value does not have three parts and a numeric index.
    """
    parts = value.rsplit(OPTION_SEPARATOR, 2)
    if len(parts) != 3:
        raise InvalidHandleError(value)
    name, repository, index = parts
    if not name or not _is_index(index):
        raise InvalidHandleError(value)
    return MenuSelection(name=name, repository=repository, index=int(index))
