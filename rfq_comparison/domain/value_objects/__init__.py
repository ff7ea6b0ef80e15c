"""Value objects for the RFQ comparison domain layer."""

from .quote import Quote, QuoteItem

__all__ = ["Quote", "QuoteItem"]
