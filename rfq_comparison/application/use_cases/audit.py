"""Helpers for emitting audit events from use cases."""

import structlog

from rfq_comparison.application.ports.audit_sink import AuditEvent, AuditSinkPort

logger = structlog.get_logger(__name__)


async def emit_audit(sink: AuditSinkPort | None, event: AuditEvent) -> None:
    """Send an event to the audit sink without letting sink failures escape.

    Args:
        sink: Optional audit sink; nothing is sent when None
        event: The event to record
    """
    if sink is None:
        return
    try:
        await sink.record(event)
    except Exception as e:
        logger.warning(
            "audit_event_dropped",
            action=event.action,
            comparison_id=event.comparison_id,
            error=str(e),
        )
