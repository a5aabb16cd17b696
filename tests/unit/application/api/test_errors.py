"""Unit tests for error to HTTP status mapping."""

from pkgsearch.application.api.v1.errors import map_error
from pkgsearch.domain.shared.error import (
    CursorOutOfRangeError,
    InvalidHandleError,
    SessionExpiredError,
    SessionStoreError,
    UnknownInteractionError,
    UpstreamFetchError,
    ValidationError,
)


class TestMapError:
    def test_validation_error_includes_field(self):
        exc = map_error(ValidationError("Please provide a search query.", field="query"))

        assert exc.status_code == 422
        assert exc.detail == {
            "code": "VALIDATION_ERROR",
            "message": "Please provide a search query.",
            "field": "query",
        }

    def test_domain_errors(self):
        assert map_error(InvalidHandleError("h")).status_code == 400
        assert map_error(SessionExpiredError()).status_code == 410

    def test_unmapped_domain_error_is_bad_request(self):
        """Domain errors without their own entry answer 400."""
        # Act
        exc = map_error(UnknownInteractionError("vote_up_1"))

        # Assert
        assert exc.status_code == 400
        assert exc.detail["code"] == "UnknownInteractionError"

    def test_subclass_uses_parent_status(self):
        """CursorOutOfRangeError is an InvalidStateError."""
        assert map_error(CursorOutOfRangeError(5, 5)).status_code == 409

    def test_infrastructure_errors_are_unavailable(self):
        assert map_error(UpstreamFetchError("down")).status_code == 503
        assert map_error(SessionStoreError("down")).status_code == 503
