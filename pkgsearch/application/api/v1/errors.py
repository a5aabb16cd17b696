"""Centralized error transformation for API routes.

Maps pkgsearch errors (domain and infrastructure) to HTTPException responses.
"""

from typing import Any

from fastapi import HTTPException

from pkgsearch.domain.shared.error import (
    DomainError,
    InfrastructureError,
    InvalidHandleError,
    InvalidStateError,
    PkgSearchError,
    SessionExpiredError,
    ValidationError,
)

DOMAIN_ERROR_STATUS_MAP: dict[type[DomainError], int] = {
    ValidationError: 422,
    InvalidHandleError: 400,
    InvalidStateError: 409,
    SessionExpiredError: 410,
}


def map_error(error: PkgSearchError) -> HTTPException:
    """Map a pkgsearch error to an HTTPException.

    Args:
        error: The pkgsearch error to map.

    Returns:
        HTTPException with appropriate status code and detail.
    """
    detail: dict[str, Any] = {
        "code": error.code,
        "message": error.message,
    }

    if isinstance(error, InfrastructureError):
        # Infrastructure errors → 503 Service Unavailable
        return HTTPException(status_code=503, detail=detail)

    if isinstance(error, DomainError):
        status_code = 400
        for error_type in type(error).__mro__:
            if error_type in DOMAIN_ERROR_STATUS_MAP:
                status_code = DOMAIN_ERROR_STATUS_MAP[error_type]
                break
        if isinstance(error, ValidationError) and error.field is not None:
            detail["field"] = error.field
        return HTTPException(status_code=status_code, detail=detail)

    # Fallback for unknown PkgSearchError subclasses
    return HTTPException(status_code=500, detail=detail)
