"""Use case for creating a new quote comparison."""

import structlog

from rfq_comparison.application.ports.audit_sink import AuditEvent, AuditSinkPort
from rfq_comparison.application.ports.comparison_repository import (
    ComparisonRepositoryPort,
)
from rfq_comparison.application.use_cases.audit import emit_audit
from rfq_comparison.domain.entities.comparison import Comparison, ScoringCriteria
from rfq_comparison.shared.config.settings import get_settings

logger = structlog.get_logger(__name__)


class CreateComparisonUseCase:
    """Use case for creating a draft comparison over a set of quotes."""

    def __init__(
        self,
        repository: ComparisonRepositoryPort,
        audit_sink: AuditSinkPort | None = None,
    ):
        """Initialize the use case with dependencies.

        Args:
            repository: Repository for comparisons
            audit_sink: Optional audit side channel
        """
        self.repository = repository
        self.audit_sink = audit_sink

    async def execute(
        self,
        tenant_id: str,
        created_by: str,
        rfq_id: str,
        title: str,
        quote_ids: list[str],
        description: str = "",
    ) -> Comparison:
        """Create and persist a new comparison.

        Args:
            tenant_id: Owning tenant
            created_by: User creating the comparison
            rfq_id: RFQ whose quotes are compared
            title: Display title
            quote_ids: Quotes to compare (at least two)
            description: Optional description

        Returns:
            The persisted comparison in draft status

        Raises:
            InsufficientQuotesError: If fewer than two quotes are given
            DuplicateQuoteError: If a quote id is repeated
        """
        scoring = get_settings().scoring
        comparison = Comparison.create(
            tenant_id=tenant_id,
            rfq_id=rfq_id,
            title=title,
            created_by=created_by,
            quote_ids=quote_ids,
            description=description,
            scoring_criteria=ScoringCriteria(
                price_weight=scoring.default_price_weight,
                quality_weight=scoring.default_quality_weight,
                delivery_weight=scoring.default_delivery_weight,
                compliance_weight=scoring.default_compliance_weight,
            ),
        )

        saved = await self.repository.create(comparison)

        logger.info(
            "comparison_created",
            comparison_id=saved.id,
            tenant_id=tenant_id,
            rfq_id=rfq_id,
            quote_count=len(saved.quote_ids),
        )
        await emit_audit(
            self.audit_sink,
            AuditEvent(
                action="comparison.created",
                tenant_id=tenant_id,
                comparison_id=saved.id,
                actor=created_by,
                details={"rfq_id": rfq_id, "quote_ids": list(saved.quote_ids)},
            ),
        )
        return saved
