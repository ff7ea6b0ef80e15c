"""Unit tests for StructlogAuditSink."""

from unittest.mock import patch

import pytest

from rfq_comparison.application.ports import AuditEvent
from rfq_comparison.infrastructure.audit.structlog_audit_sink import (
    StructlogAuditSink,
)


class TestStructlogAuditSink:
    """Test cases for the structlog audit sink."""

    @pytest.mark.asyncio
    async def test_record_logs_event(self):
        event = AuditEvent(
            action="comparison.activated",
            tenant_id="tenant-1",
            comparison_id="cmp-1",
            actor="buyer-1",
            details={"quote_id": "q1"},
        )

        with patch(
            "rfq_comparison.infrastructure.audit.structlog_audit_sink.logger"
        ) as mock_logger:
            await StructlogAuditSink().record(event)

        mock_logger.info.assert_called_once()
        args, kwargs = mock_logger.info.call_args
        assert args == ("audit_event",)
        assert kwargs["action"] == "comparison.activated"
        assert kwargs["comparison_id"] == "cmp-1"
        assert kwargs["details"] == {"quote_id": "q1"}
        assert kwargs["occurred_at"] == event.occurred_at.isoformat()
