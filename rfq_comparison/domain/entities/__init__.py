"""Domain entities for the RFQ comparison service."""

from .comparison import (
    Comparison,
    ComparisonStatus,
    ItemComparison,
    ItemDetails,
    PriceDifference,
    QuoteScore,
    ScoringCriteria,
)

__all__ = [
    "Comparison",
    "ComparisonStatus",
    "ScoringCriteria",
    "QuoteScore",
    "PriceDifference",
    "ItemComparison",
    "ItemDetails",
]
