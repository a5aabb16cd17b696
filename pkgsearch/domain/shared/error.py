"""Error hierarchy for pkgsearch.

Error layers:
- PkgSearchError: Base class for all pkgsearch errors
- DomainError: Bad input, stale handles, expired sessions (user-facing messages)
- InfrastructureError: Catalog, session store or configuration failures

The interaction service turns these into chat responses; anything that still
escapes is mapped by the exception handlers in app.py.
"""


class PkgSearchError(Exception):
    """Base class for all pkgsearch errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(message)


# =============================================================================
# Domain Errors
# =============================================================================


class DomainError(PkgSearchError):
    """Base class for domain errors."""


class ValidationError(DomainError):
    """Input validation failed (empty query, invalid regex)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message, code="VALIDATION_ERROR")
        self.field = field


class InvalidStateError(DomainError):
    """Operation not allowed in current state."""


class CursorOutOfRangeError(InvalidStateError):
    """A navigation step would leave the bounds of the session results."""

    def __init__(self, index: int, length: int) -> None:
        super().__init__(
            f"Navigation index {index} outside of [0, {length})",
            code="CURSOR_OUT_OF_RANGE",
        )
        self.index = index
        self.length = length


class SessionExpiredError(DomainError):
    """The search session is gone or no longer matches the handle."""

    def __init__(self, message: str = "Search session expired") -> None:
        super().__init__(message, code="SESSION_EXPIRED")


class InvalidHandleError(DomainError):
    """A component handle could not be decoded."""

    def __init__(self, handle: str) -> None:
        super().__init__(f"Malformed component handle: {handle!r}", code="INVALID_HANDLE")
        self.handle = handle


class UnknownInteractionError(DomainError):
    """Command or component the service does not know how to handle."""


# =============================================================================
# Infrastructure Errors
# =============================================================================


class InfrastructureError(PkgSearchError):
    """Base class for infrastructure/system errors."""


class UpstreamFetchError(InfrastructureError):
    """The package catalog could not be fetched or decoded."""


class SessionStoreError(InfrastructureError):
    """The session key-value store is unavailable."""


class ConfigurationError(InfrastructureError):
    """System misconfiguration detected."""
