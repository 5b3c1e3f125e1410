"""Tests for the error taxonomy and its HTTP mapping."""

import pytest

from exceptions.custom_errors import (
    CUSTOM_ERRORS,
    DuplicateActiveProtocolError,
    FutureCompletionError,
    IneligibleSubjectError,
    NotFoundError,
    SchedulingError,
    ValidationError,
    http_status_for,
)


@pytest.mark.parametrize(
    "exc, status",
    [
        (ValidationError("bad"), 400),
        (IneligibleSubjectError("sick"), 409),
        (DuplicateActiveProtocolError("busy"), 409),
        (FutureCompletionError("later"), 400),
        (NotFoundError("gone"), 404),
        (ValueError("other"), 500),
    ],
)
def test_http_status_for(exc, status) -> None:
    assert http_status_for(exc) == status


def test_guard_errors_share_a_base() -> None:
    guards = [ValidationError, IneligibleSubjectError, DuplicateActiveProtocolError, FutureCompletionError, NotFoundError]
    assert all(issubclass(cls, SchedulingError) for cls in guards)
    assert set(guards) <= set(CUSTOM_ERRORS)


def test_validation_error_lists_messages() -> None:
    err = ValidationError(["Protocol name is required.", "Step 1 title is required."])
    assert err.errors == ["Protocol name is required.", "Step 1 title is required."]
    assert "Step 1 title is required." in str(err)
    assert ValidationError("single").errors == ["single"]
