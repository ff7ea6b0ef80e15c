"""Unit tests for CreateComparisonUseCase."""

from unittest.mock import AsyncMock

import pytest

from rfq_comparison.application.ports import AuditEvent
from rfq_comparison.application.use_cases import CreateComparisonUseCase
from rfq_comparison.domain.entities import ComparisonStatus, ScoringCriteria
from rfq_comparison.shared.exceptions import (
    DuplicateQuoteError,
    InsufficientQuotesError,
)


class TestCreateComparisonUseCase:
    """Test cases for CreateComparisonUseCase."""

    @pytest.fixture
    def mock_repository(self):
        """Create a mock repository that echoes the saved comparison."""
        repository = AsyncMock()
        repository.create.side_effect = lambda comparison: comparison
        return repository

    @pytest.fixture
    def mock_audit_sink(self):
        """Create a mock audit sink."""
        return AsyncMock()

    @pytest.fixture
    def use_case(self, mock_repository, mock_audit_sink):
        """Create a use case instance with mocks."""
        return CreateComparisonUseCase(
            repository=mock_repository, audit_sink=mock_audit_sink
        )

    @pytest.mark.asyncio
    async def test_creates_and_persists_draft(
        self, use_case, mock_repository, mock_audit_sink
    ):
        comparison = await use_case.execute(
            tenant_id="tenant-1",
            created_by="buyer-1",
            rfq_id="rfq-1",
            title="Ventilators",
            quote_ids=["q1", "q2"],
            description="Q3 purchase",
        )

        assert comparison.status == ComparisonStatus.DRAFT
        assert comparison.tenant_id == "tenant-1"
        assert comparison.created_by == "buyer-1"
        assert comparison.description == "Q3 purchase"
        assert comparison.scoring_criteria == ScoringCriteria()
        mock_repository.create.assert_awaited_once_with(comparison)

        event = mock_audit_sink.record.await_args.args[0]
        assert isinstance(event, AuditEvent)
        assert event.action == "comparison.created"
        assert event.comparison_id == comparison.id
        assert event.actor == "buyer-1"

    @pytest.mark.asyncio
    async def test_rejects_single_quote_without_persisting(
        self, use_case, mock_repository, mock_audit_sink
    ):
        with pytest.raises(InsufficientQuotesError):
            await use_case.execute("tenant-1", "buyer-1", "rfq-1", "x", ["q1"])

        mock_repository.create.assert_not_awaited()
        mock_audit_sink.record.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_rejects_duplicate_quotes(self, use_case, mock_repository):
        with pytest.raises(DuplicateQuoteError):
            await use_case.execute("tenant-1", "buyer-1", "rfq-1", "x", ["q1", "q1"])
        mock_repository.create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_audit_failure_does_not_fail_creation(
        self, use_case, mock_audit_sink
    ):
        mock_audit_sink.record.side_effect = RuntimeError("sink down")

        comparison = await use_case.execute(
            "tenant-1", "buyer-1", "rfq-1", "x", ["q1", "q2"]
        )

        assert comparison.quote_ids == ["q1", "q2"]

    @pytest.mark.asyncio
    async def test_works_without_audit_sink(self, mock_repository):
        use_case = CreateComparisonUseCase(repository=mock_repository)
        comparison = await use_case.execute(
            "tenant-1", "buyer-1", "rfq-1", "x", ["q1", "q2"]
        )
        assert comparison.rfq_id == "rfq-1"
