"""Unit tests for API exception handlers."""

import pytest

from rfq_comparison.interfaces.api.exception_handlers import (
    create_error_response,
    status_code_for,
)
from rfq_comparison.shared.exceptions import (
    ComparisonNotFoundError,
    ComparisonServiceError,
    DuplicateQuoteError,
    InsufficientQuotesError,
    InvalidStateError,
    InvalidWeightsError,
    MinimumQuotesError,
    NoQuotesError,
    QuoteEditLockedError,
    QuoteNotInComparisonError,
    QuoteScoreNotFoundError,
)


@pytest.mark.parametrize(
    ("exc", "expected"),
    [
        (NoQuotesError(), 400),
        (InsufficientQuotesError(1), 400),
        (DuplicateQuoteError("q"), 400),
        (InvalidWeightsError(99.0), 400),
        (InvalidStateError("nope", "draft"), 409),
        (QuoteEditLockedError("add", "completed"), 409),
        (MinimumQuotesError(1, "draft"), 409),
        (ComparisonNotFoundError("c"), 404),
        (QuoteNotInComparisonError("q"), 404),
        (QuoteScoreNotFoundError("q"), 404),
        (ComparisonServiceError("boom"), 500),
    ],
)
def test_status_code_for(exc, expected):
    assert status_code_for(exc) == expected


def test_error_response_body():
    response = create_error_response(
        error_code="INVALID_WEIGHTS",
        message="bad weights",
        status_code=400,
        request_id="req-1",
        details={"total": 99.0},
    )

    assert response.status_code == 400
    assert response.body == (
        b'{"error":{"code":"INVALID_WEIGHTS","message":"bad weights",'
        b'"request_id":"req-1","details":{"total":99.0}}}'
    )


def test_service_error_defaults_code_to_class_name():
    assert ComparisonServiceError("boom").error_code == "ComparisonServiceError"
