"""Use case for mutating an existing comparison.

Every operation is a single load, mutate, save cycle against the repository.
A rejected mutation raises before anything is written.
"""

from collections.abc import Callable
from typing import Any

import structlog

from rfq_comparison.application.ports.audit_sink import AuditEvent, AuditSinkPort
from rfq_comparison.application.ports.comparison_repository import (
    ComparisonRepositoryPort,
)
from rfq_comparison.application.use_cases.audit import emit_audit
from rfq_comparison.domain.entities.comparison import Comparison, ScoringCriteria

logger = structlog.get_logger(__name__)


class ManageComparisonUseCase:
    """Use case for details, weights, quote membership and lifecycle changes."""

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

    async def _apply(
        self,
        tenant_id: str,
        comparison_id: str,
        action: str,
        mutate: Callable[[Comparison], None],
        actor: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> Comparison:
        comparison = await self.repository.get_by_id(tenant_id, comparison_id)
        mutate(comparison)
        saved = await self.repository.update(comparison)

        logger.info(
            "comparison_updated",
            action=action,
            comparison_id=comparison_id,
            tenant_id=tenant_id,
            status=saved.status.value,
        )
        await emit_audit(
            self.audit_sink,
            AuditEvent(
                action=f"comparison.{action}",
                tenant_id=tenant_id,
                comparison_id=comparison_id,
                actor=actor,
                details=details or {},
            ),
        )
        return saved

    async def update_details(
        self,
        tenant_id: str,
        comparison_id: str,
        title: str | None = None,
        description: str | None = None,
        notes: str | None = None,
        actor: str | None = None,
    ) -> Comparison:
        """Update title, description and notes. None leaves a field unchanged."""
        changed = {
            key: value
            for key, value in (
                ("title", title),
                ("description", description),
                ("notes", notes),
            )
            if value is not None
        }
        return await self._apply(
            tenant_id,
            comparison_id,
            "details_updated",
            lambda c: c.update_details(
                title=title, description=description, notes=notes
            ),
            actor=actor,
            details={"fields": sorted(changed)},
        )

    async def update_scoring_criteria(
        self,
        tenant_id: str,
        comparison_id: str,
        criteria: ScoringCriteria,
        actor: str | None = None,
    ) -> Comparison:
        """Replace the scoring weights.

        Raises:
            InvalidWeightsError: If the weights do not sum to 100
        """
        return await self._apply(
            tenant_id,
            comparison_id,
            "criteria_updated",
            lambda c: c.update_scoring_criteria(criteria),
            actor=actor,
            details=criteria.model_dump(),
        )

    async def add_quote(
        self,
        tenant_id: str,
        comparison_id: str,
        quote_id: str,
        actor: str | None = None,
    ) -> Comparison:
        """Add a quote to the comparison."""
        return await self._apply(
            tenant_id,
            comparison_id,
            "quote_added",
            lambda c: c.add_quote(quote_id),
            actor=actor,
            details={"quote_id": quote_id},
        )

    async def remove_quote(
        self,
        tenant_id: str,
        comparison_id: str,
        quote_id: str,
        actor: str | None = None,
    ) -> Comparison:
        """Remove a quote from the comparison."""
        return await self._apply(
            tenant_id,
            comparison_id,
            "quote_removed",
            lambda c: c.remove_quote(quote_id),
            actor=actor,
            details={"quote_id": quote_id},
        )

    async def activate(
        self, tenant_id: str, comparison_id: str, actor: str | None = None
    ) -> Comparison:
        """Move a draft comparison to active."""
        return await self._apply(
            tenant_id, comparison_id, "activated", Comparison.activate, actor=actor
        )

    async def complete(
        self, tenant_id: str, comparison_id: str, actor: str | None = None
    ) -> Comparison:
        """Move an active comparison to completed."""
        return await self._apply(
            tenant_id, comparison_id, "completed", Comparison.complete, actor=actor
        )

    async def archive(
        self, tenant_id: str, comparison_id: str, actor: str | None = None
    ) -> Comparison:
        """Archive a comparison."""
        return await self._apply(
            tenant_id, comparison_id, "archived", Comparison.archive, actor=actor
        )

    async def delete(
        self, tenant_id: str, comparison_id: str, actor: str | None = None
    ) -> None:
        """Delete a comparison.

        Raises:
            ComparisonNotFoundError: If the comparison does not exist
        """
        await self.repository.delete(tenant_id, comparison_id)

        logger.info(
            "comparison_deleted", comparison_id=comparison_id, tenant_id=tenant_id
        )
        await emit_audit(
            self.audit_sink,
            AuditEvent(
                action="comparison.deleted",
                tenant_id=tenant_id,
                comparison_id=comparison_id,
                actor=actor,
            ),
        )
