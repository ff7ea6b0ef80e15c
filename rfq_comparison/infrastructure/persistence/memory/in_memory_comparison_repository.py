"""In-memory implementation of ComparisonRepositoryPort.

Used by the unit and E2E tests. Stored comparisons are deep copies, so callers
cannot mutate repository state without going through update().
"""

import asyncio

import structlog

from rfq_comparison.application.ports.comparison_repository import (
    ComparisonRepositoryPort,
    ListCriteria,
    ListResult,
)
from rfq_comparison.domain.entities.comparison import Comparison
from rfq_comparison.shared.exceptions import ComparisonNotFoundError

logger = structlog.get_logger(__name__)


class InMemoryComparisonRepository(ComparisonRepositoryPort):
    """Comparison repository backed by a dict keyed by (tenant_id, id)."""

    def __init__(self) -> None:
        self._items: dict[tuple[str, str], Comparison] = {}
        self._lock = asyncio.Lock()

    async def create(self, comparison: Comparison) -> Comparison:
        async with self._lock:
            self._items[(comparison.tenant_id, comparison.id)] = comparison.model_copy(
                deep=True
            )
        return comparison

    async def get_by_id(self, tenant_id: str, comparison_id: str) -> Comparison:
        stored = self._items.get((tenant_id, comparison_id))
        if stored is None:
            raise ComparisonNotFoundError(comparison_id)
        return stored.model_copy(deep=True)

    async def get_by_rfq(self, tenant_id: str, rfq_id: str) -> list[Comparison]:
        matches = [
            c
            for (owner, _), c in self._items.items()
            if owner == tenant_id and c.rfq_id == rfq_id
        ]
        matches.sort(key=lambda c: c.created_at, reverse=True)
        return [c.model_copy(deep=True) for c in matches]

    async def list_comparisons(self, criteria: ListCriteria) -> ListResult:
        matches = [
            c
            for (owner, _), c in self._items.items()
            if owner == criteria.tenant_id
            and (not criteria.rfq_id or c.rfq_id == criteria.rfq_id)
            and (not criteria.status or c.status in criteria.status)
            and (not criteria.created_by or c.created_by == criteria.created_by)
        ]
        matches.sort(key=lambda c: c.id)
        matches.sort(
            key=lambda c: getattr(c, criteria.sort_by),
            reverse=criteria.sort_direction == "desc",
        )

        page = matches[criteria.offset : criteria.offset + criteria.page_size]
        return ListResult.paginate(
            [c.model_copy(deep=True) for c in page], len(matches), criteria
        )

    async def update(self, comparison: Comparison) -> Comparison:
        key = (comparison.tenant_id, comparison.id)
        async with self._lock:
            if key not in self._items:
                raise ComparisonNotFoundError(comparison.id)
            self._items[key] = comparison.model_copy(deep=True)
        return comparison

    async def delete(self, tenant_id: str, comparison_id: str) -> None:
        async with self._lock:
            if self._items.pop((tenant_id, comparison_id), None) is None:
                raise ComparisonNotFoundError(comparison_id)
        logger.debug("comparison_removed_from_memory", comparison_id=comparison_id)
