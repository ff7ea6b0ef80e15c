"""Domain services for the RFQ comparison service.

This module exports domain services that implement core business logic.
"""

from rfq_comparison.domain.services.comparison_ranker import (
    NO_QUOTES_RECOMMENDATION,
    ComparisonAnalysis,
    ComparisonRanker,
)
from rfq_comparison.domain.services.quote_scorer import (
    STRENGTH_PHRASES,
    WEAKNESS_PHRASES,
    Criterion,
    QuoteScorer,
    parse_delivery_days,
)

__all__ = [
    "QuoteScorer",
    "Criterion",
    "STRENGTH_PHRASES",
    "WEAKNESS_PHRASES",
    "parse_delivery_days",
    "ComparisonRanker",
    "ComparisonAnalysis",
    "NO_QUOTES_RECOMMENDATION",
]
