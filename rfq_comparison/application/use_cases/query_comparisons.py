"""Read-only use cases for comparisons."""

import structlog

from rfq_comparison.application.ports.comparison_repository import (
    ComparisonRepositoryPort,
    ListCriteria,
    ListResult,
)
from rfq_comparison.domain.entities.comparison import Comparison

logger = structlog.get_logger(__name__)


class QueryComparisonsUseCase:
    """Use case for looking up and listing comparisons."""

    def __init__(self, repository: ComparisonRepositoryPort):
        self.repository = repository

    async def get(self, tenant_id: str, comparison_id: str) -> Comparison:
        """Fetch a single comparison.

        Raises:
            ComparisonNotFoundError: If the comparison does not exist
        """
        return await self.repository.get_by_id(tenant_id, comparison_id)

    async def get_by_rfq(self, tenant_id: str, rfq_id: str) -> list[Comparison]:
        """Fetch every comparison created for an RFQ."""
        comparisons = await self.repository.get_by_rfq(tenant_id, rfq_id)
        logger.debug(
            "comparisons_fetched_by_rfq",
            tenant_id=tenant_id,
            rfq_id=rfq_id,
            count=len(comparisons),
        )
        return comparisons

    async def list_comparisons(self, criteria: ListCriteria) -> ListResult:
        """List comparisons with filtering, sorting and paging."""
        result = await self.repository.list_comparisons(criteria)
        logger.debug(
            "comparisons_listed",
            tenant_id=criteria.tenant_id,
            total=result.total,
            page=result.page,
        )
        return result
