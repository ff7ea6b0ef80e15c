"""Infrastructure-specific exceptions for the RFQ comparison service."""


class InfrastructureException(Exception):  # noqa: N818
    """Base exception for all infrastructure-related errors."""

    pass


class DatabaseError(InfrastructureException):
    """Raised when a database operation fails."""

    pass
