"""Custom Dishka scopes for pkgsearch."""

from dishka import BaseScope, new_scope


class Scope(BaseScope):  # type: ignore[misc]  # BaseScope is designed to be subclassed
    """pkgsearch dependency injection scopes.

    Hierarchy: APP -> UOW

    - APP: Application lifetime (HTTP client, session store backend, verifier)
    - UOW: Unit of Work (one inbound interaction or CLI invocation)
    """

    APP = new_scope("APP")
    UOW = new_scope("UOW")
