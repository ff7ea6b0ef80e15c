"""Application use cases."""

from rfq_comparison.application.use_cases.calculate_comparison_scores import (
    CalculateComparisonScoresUseCase,
)
from rfq_comparison.application.use_cases.create_comparison import (
    CreateComparisonUseCase,
)
from rfq_comparison.application.use_cases.manage_comparison import (
    ManageComparisonUseCase,
)
from rfq_comparison.application.use_cases.query_comparisons import (
    QueryComparisonsUseCase,
)

__all__ = [
    "CalculateComparisonScoresUseCase",
    "CreateComparisonUseCase",
    "ManageComparisonUseCase",
    "QueryComparisonsUseCase",
]
