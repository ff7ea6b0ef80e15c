"""Use case for scoring the quotes of a comparison."""

import structlog

from rfq_comparison.application.ports.audit_sink import AuditEvent, AuditSinkPort
from rfq_comparison.application.ports.comparison_repository import (
    ComparisonRepositoryPort,
)
from rfq_comparison.application.use_cases.audit import emit_audit
from rfq_comparison.domain.entities.comparison import Comparison
from rfq_comparison.domain.services.comparison_ranker import ComparisonRanker
from rfq_comparison.domain.value_objects.quote import Quote

logger = structlog.get_logger(__name__)


class CalculateComparisonScoresUseCase:
    """Use case for running the scoring engine and storing its results.

    The caller supplies the quote records; the comparison only holds quote
    identifiers. Results from a previous run are replaced wholesale.
    """

    def __init__(
        self,
        repository: ComparisonRepositoryPort,
        ranker: ComparisonRanker | None = None,
        audit_sink: AuditSinkPort | None = None,
    ):
        """Initialize the use case with dependencies.

        Args:
            repository: Repository for comparisons
            ranker: Ranking service, created with default heuristics if omitted
            audit_sink: Optional audit side channel
        """
        self.repository = repository
        self.ranker = ranker or ComparisonRanker()
        self.audit_sink = audit_sink

    async def execute(
        self, tenant_id: str, comparison_id: str, quotes: list[Quote]
    ) -> Comparison:
        """Score the quotes and persist the results on the comparison.

        Args:
            tenant_id: Owning tenant
            comparison_id: Comparison to score
            quotes: Full quote records to score

        Returns:
            The updated comparison

        Raises:
            ComparisonNotFoundError: If the comparison does not exist
            NoQuotesError: If no quotes are supplied
        """
        comparison = await self.repository.get_by_id(tenant_id, comparison_id)

        analysis = self.ranker.analyze(quotes, comparison.scoring_criteria)

        comparison.set_scores(analysis.quote_scores)
        comparison.set_price_differences(analysis.price_differences)
        comparison.set_item_comparisons(analysis.item_comparisons)
        comparison.set_recommendation(analysis.recommendation)

        saved = await self.repository.update(comparison)

        logger.info(
            "scores_calculated",
            comparison_id=comparison_id,
            tenant_id=tenant_id,
            quote_count=len(quotes),
            best_overall_quote=saved.best_overall_quote,
            best_price_quote=saved.best_price_quote,
        )
        await emit_audit(
            self.audit_sink,
            AuditEvent(
                action="comparison.scores_calculated",
                tenant_id=tenant_id,
                comparison_id=comparison_id,
                details={
                    "quote_count": len(quotes),
                    "best_overall_quote": saved.best_overall_quote,
                    "best_price_quote": saved.best_price_quote,
                },
            ),
        )
        return saved
