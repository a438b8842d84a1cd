"""
Unit tests for shared error types.
"""

from shared.errors import (
    AuthenticationError,
    ContentNotFoundError,
    ExternalServiceError,
    SiteException,
    ValidationError,
)
from shared.logging import clear_context, set_request_id


def test_error_response_carries_request_id():
    set_request_id("req-123")
    try:
        response = ValidationError("Bad input", details={"field": "tags"}).to_response()
    finally:
        clear_context()

    assert response.request_id == "req-123"
    assert response.code == "VALIDATION_ERROR"
    assert response.message == "Bad input"
    assert response.details == {"field": "tags"}


def test_status_codes():
    assert SiteException("X", "x").status_code == 400
    assert AuthenticationError().status_code == 401
    assert ContentNotFoundError().status_code == 404
    assert ValidationError().status_code == 422
    assert ExternalServiceError("cms").status_code == 502


def test_external_service_error_message():
    error = ExternalServiceError("cms", "Unexpected status 500", details={"status_code": 500})

    assert error.service == "cms"
    assert str(error) == "cms: Unexpected status 500"
    assert error.to_response().details == {"status_code": 500}
