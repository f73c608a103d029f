"""Outcome & Errors: failure values map to the typed error hierarchy.

Tests:
    - Outcome.ok / Outcome.fail and unwrap()
    - NOT_FOUND_OR_INVALID → NotFoundOrInvalidError (400, ids in details)
    - ILLEGAL_TRANSITION → IllegalTransitionError (400)
    - to_response() envelope shape
"""

import pytest

from bookmanager.core.domain_types import PublishedStatus
from bookmanager.core.errors import (
    DatabaseError, ErrorCategory, IllegalTransitionError, NotFoundOrInvalidError,
)
from bookmanager.core.outcome import (
    FailureKind, Outcome, illegal_transition, not_found_or_invalid,
)


def test_ok_outcome_unwraps_value():
    outcome = Outcome.ok("value")
    assert outcome.is_ok
    assert outcome.unwrap() == "value"


def test_failed_outcome_raises_on_unwrap():
    outcome = Outcome.fail(not_found_or_invalid("Book", [5]))
    assert not outcome.is_ok
    with pytest.raises(NotFoundOrInvalidError):
        outcome.unwrap()


def test_not_found_error_lists_ids():
    error = not_found_or_invalid("Author", [99, 100]).to_error()
    assert isinstance(error, NotFoundOrInvalidError)
    assert error.http_status == 400
    assert error.category is ErrorCategory.RESOURCE_NOT_FOUND
    assert error.message == "Author does not exist: id=[99, 100]"
    assert error.to_response()["error"]["details"] == {"ids": [99, 100]}


def test_not_found_error_single_id_message():
    error = not_found_or_invalid("Book", [123]).to_error()
    assert error.message == "Book does not exist: id=123"


def test_not_found_error_empty_ids_message():
    error = not_found_or_invalid("Author", []).to_error()
    assert error.message == "At least one author is required"


def test_illegal_transition_error():
    failure = illegal_transition(
        PublishedStatus.PUBLISHED, PublishedStatus.UNPUBLISHED,
    )
    assert failure.kind is FailureKind.ILLEGAL_TRANSITION
    error = failure.to_error()
    assert isinstance(error, IllegalTransitionError)
    assert error.http_status == 400
    body = error.to_response()["error"]
    assert body["code"] == "ILLEGAL_TRANSITION"
    assert body["category"] == "business_rule"
    assert body["details"] == {"publishedStatus": "PUBLISHED -> UNPUBLISHED"}


def test_database_error_is_server_side():
    error = DatabaseError("Connection or operational error", "execute")
    assert error.http_status == 503
    assert error.message == "Database execute failed: Connection or operational error"
    assert error.to_response()["error"]["severity"] == "critical"
