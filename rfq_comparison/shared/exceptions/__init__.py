"""
Custom exceptions for the RFQ comparison service.

This module defines domain-specific exceptions that can be raised
throughout the application and handled consistently at the API layer.
"""

from typing import Any


class ComparisonServiceError(Exception):
    """Base exception for all comparison service custom exceptions."""

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize the exception.

        Args:
            message: User-friendly error message
            error_code: Machine-readable error code
            details: Additional error details
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


# Validation errors


class ComparisonValidationError(ComparisonServiceError):
    """Raised when input to a comparison operation is invalid."""

    def __init__(
        self,
        message: str,
        error_code: str = "VALIDATION_ERROR",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message=message, error_code=error_code, details=details)


class NoQuotesError(ComparisonValidationError):
    """Raised when scoring is requested with an empty quote list."""

    def __init__(self) -> None:
        super().__init__(
            message="No quotes provided for scoring",
            error_code="NO_QUOTES",
        )


class InsufficientQuotesError(ComparisonValidationError):
    """Raised when a comparison would hold fewer than two quotes."""

    def __init__(self, quote_count: int) -> None:
        """
        Initialize InsufficientQuotesError.

        Args:
            quote_count: Number of quotes the comparison would be left with
        """
        super().__init__(
            message="At least two quotes required for comparison",
            error_code="INSUFFICIENT_QUOTES",
            details={"quote_count": quote_count},
        )


class DuplicateQuoteError(ComparisonValidationError):
    """Raised when a quote is already part of the comparison."""

    def __init__(self, quote_id: str) -> None:
        super().__init__(
            message=f"Quote '{quote_id}' already in comparison",
            error_code="DUPLICATE_QUOTE",
            details={"quote_id": quote_id},
        )


class InvalidWeightsError(ComparisonValidationError):
    """Raised when scoring weights do not sum to 100."""

    def __init__(self, total: float) -> None:
        """
        Initialize InvalidWeightsError.

        Args:
            total: The actual sum of the supplied weights
        """
        super().__init__(
            message=f"Scoring weights must sum to 100, got {total:.2f}",
            error_code="INVALID_WEIGHTS",
            details={"total": total},
        )


# State violations


class InvalidStateError(ComparisonServiceError):
    """Raised when an operation is invalid for the comparison's current status."""

    def __init__(self, message: str, status: str) -> None:
        """
        Initialize InvalidStateError.

        Args:
            message: Description of the rejected transition
            status: Current status of the comparison
        """
        super().__init__(
            message=message,
            error_code="INVALID_STATE",
            details={"status": status},
        )


class QuoteEditLockedError(InvalidStateError):
    """Raised when quotes are edited on a completed or archived comparison."""

    def __init__(self, action: str, status: str) -> None:
        super().__init__(
            message=f"Cannot {action} quotes on a {status} comparison",
            status=status,
        )


class MinimumQuotesError(InvalidStateError):
    """Raised when an existing comparison would drop below two quotes."""

    def __init__(self, quote_count: int, status: str) -> None:
        """
        Initialize MinimumQuotesError.

        Args:
            quote_count: Number of quotes the comparison holds or would keep
            status: Current status of the comparison
        """
        super().__init__(
            message="At least two quotes required for comparison",
            status=status,
        )
        self.error_code = "MINIMUM_QUOTES"
        self.details["quote_count"] = quote_count


# Not found


class ComparisonNotFoundError(ComparisonServiceError):
    """Raised when a comparison cannot be found for the tenant."""

    def __init__(self, comparison_id: str) -> None:
        super().__init__(
            message=f"Comparison '{comparison_id}' not found",
            error_code="COMPARISON_NOT_FOUND",
            details={"comparison_id": comparison_id},
        )


class QuoteNotInComparisonError(ComparisonServiceError):
    """Raised when a quote is not included in the comparison."""

    def __init__(self, quote_id: str) -> None:
        super().__init__(
            message=f"Quote '{quote_id}' not included in this comparison",
            error_code="QUOTE_NOT_IN_COMPARISON",
            details={"quote_id": quote_id},
        )


class QuoteScoreNotFoundError(ComparisonServiceError):
    """Raised when no score has been calculated for a quote."""

    def __init__(self, quote_id: str) -> None:
        super().__init__(
            message=f"Score not found for quote '{quote_id}'",
            error_code="QUOTE_SCORE_NOT_FOUND",
            details={"quote_id": quote_id},
        )


__all__ = [
    "ComparisonServiceError",
    "ComparisonValidationError",
    "NoQuotesError",
    "InsufficientQuotesError",
    "DuplicateQuoteError",
    "InvalidWeightsError",
    "InvalidStateError",
    "QuoteEditLockedError",
    "MinimumQuotesError",
    "ComparisonNotFoundError",
    "QuoteNotInComparisonError",
    "QuoteScoreNotFoundError",
]
