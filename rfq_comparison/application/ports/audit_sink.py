"""Audit sink port interface.

Audit events are a fire-and-forget side channel: a failing sink must never
fail the operation that produced the event.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from rfq_comparison.shared.utils.timezone import now_utc


class AuditEvent(BaseModel):
    """A single auditable action on a comparison."""

    model_config = ConfigDict(frozen=True)

    action: str
    tenant_id: str
    comparison_id: str
    actor: str | None = None
    details: dict[str, Any] = Field(default_factory=dict)
    occurred_at: datetime = Field(default_factory=now_utc)


class AuditSinkPort(ABC):
    """Port interface for recording audit events."""

    @abstractmethod
    async def record(self, event: AuditEvent) -> None:
        """Record an audit event.

        Args:
            event: The event to record
        """
        pass
