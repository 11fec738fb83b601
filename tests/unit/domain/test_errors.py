"""
Unit tests for the error taxonomy.
"""

import pytest

from schedulytics.domain.errors import (
    ApplicationError,
    DomainError,
    ErrorCategory,
    InternalError,
    InvalidArgumentError,
    JobNotFoundError,
    RepositoryError,
    StreamUnavailableError,
)


@pytest.mark.parametrize(
    "error_class, category",
    [
        (InvalidArgumentError, ErrorCategory.INVALID_ARGUMENT),
        (JobNotFoundError, ErrorCategory.NOT_FOUND),
        (InternalError, ErrorCategory.INTERNAL),
        (StreamUnavailableError, ErrorCategory.UNAVAILABLE),
    ],
)
def test_application_errors_carry_their_category(error_class, category):
    error = error_class("details")

    assert error.category is category
    assert isinstance(error, ApplicationError)


def test_message_is_the_technical_detail():
    error = InternalError("Internal error: connection refused")

    assert str(error) == "Internal error: connection refused"
    assert error.title == "Internal Error"


def test_message_falls_back_to_category_text():
    error = JobNotFoundError()

    assert str(error) == "The requested job does not exist."


def test_category_can_be_overridden():
    error = ApplicationError("x", category=ErrorCategory.UNAVAILABLE)

    assert error.category is ErrorCategory.UNAVAILABLE
    assert error.title == "Stream Unavailable"


def test_to_dict():
    error = InvalidArgumentError("bad id", context={"id": "x"})

    assert error.to_dict() == {
        "error": "invalid_argument",
        "title": "Invalid Argument",
        "message": "The request contains an identifier that could not be parsed.",
        "detail": "bad id",
    }
    assert error.context == {"id": "x"}


def test_domain_error_keeps_original():
    cause = ConnectionError("reset")

    error = RepositoryError("store failed", cause)

    assert isinstance(error, DomainError)
    assert error.original_error is cause
