"""Tests for the error hierarchy and classify() - the closed ErrorKind set."""

import pytest
from pydantic import BaseModel, ValidationError

from store_api.core.errors import (
    DatabaseError, ErrorKind, PayloadValidationError,
    PersistenceValidationError, ResourceNotFoundError, classify,
    format_validation_errors,
)

class _Sample(BaseModel):
    count: int


def test_payload_validation_error_is_client_input():
    err = PayloadValidationError("email: bad")
    assert classify(err) == ErrorKind.CLIENT_INPUT
    assert err.http_status == 400
    assert err.to_response() == {"message": "email: bad"}


def test_persistence_validation_error_is_client_input():
    err = PersistenceValidationError("CHECK constraint failed")
    assert classify(err) == ErrorKind.CLIENT_INPUT
    assert err.http_status == 400


def test_not_found_carries_entity_context():
    err = ResourceNotFoundError("User", "abc")
    assert classify(err) == ErrorKind.NOT_FOUND
    assert err.http_status == 404
    assert err.context.entity == "User"
    assert err.context.entity_id == "abc"
    assert "abc" in err.message


def test_database_error_is_unexpected():
    err = DatabaseError("connection refused", "list")
    assert classify(err) == ErrorKind.UNEXPECTED
    assert err.http_status == 500
    assert err.operation == "list"


def test_pydantic_validation_error_is_client_input():
    with pytest.raises(ValidationError) as info:
        _Sample.model_validate({"count": "many"})
    assert classify(info.value) == ErrorKind.CLIENT_INPUT


@pytest.mark.parametrize("exc", [RuntimeError("boom"), KeyError("x"), ValueError()])
def test_any_other_exception_is_unexpected(exc):
    assert classify(exc) == ErrorKind.UNEXPECTED


def test_format_validation_errors_drops_location_prefix():
    message = format_validation_errors([
        {"loc": ("body", "firstName"), "msg": "String should have at least 1 character"},
        {"loc": ("query", "limit"), "msg": "Input should be a valid integer"},
    ])
    assert message == (
        "firstName: String should have at least 1 character; "
        "limit: Input should be a valid integer"
    )


def test_format_validation_errors_without_field():
    assert format_validation_errors([{"loc": ("body",), "msg": "Field required"}]) == "Field required"
    assert format_validation_errors([]) == "Invalid request data"
