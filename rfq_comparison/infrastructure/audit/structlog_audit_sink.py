"""Audit sink that writes events to the structured log."""

import structlog

from rfq_comparison.application.ports.audit_sink import AuditEvent, AuditSinkPort

logger = structlog.get_logger("rfq_comparison.audit")


class StructlogAuditSink(AuditSinkPort):
    """Emit each audit event as a structlog record named ``audit_event``."""

    async def record(self, event: AuditEvent) -> None:
        logger.info(
            "audit_event",
            action=event.action,
            tenant_id=event.tenant_id,
            comparison_id=event.comparison_id,
            actor=event.actor,
            occurred_at=event.occurred_at.isoformat(),
            details=event.details,
        )
