"""Unit tests for CalculateComparisonScoresUseCase."""

from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio

from rfq_comparison.application.use_cases import CalculateComparisonScoresUseCase
from rfq_comparison.domain.entities import Comparison, ScoringCriteria
from rfq_comparison.domain.services import ComparisonRanker
from rfq_comparison.infrastructure.persistence.memory.in_memory_comparison_repository import (  # noqa: E501
    InMemoryComparisonRepository,
)
from rfq_comparison.shared.exceptions import ComparisonNotFoundError, NoQuotesError
from tests.fixtures import bare_quote_pair, detailed_quotes


class TestCalculateComparisonScoresUseCase:
    """Test cases for CalculateComparisonScoresUseCase."""

    @pytest.fixture
    def repository(self):
        """Create an in-memory repository."""
        return InMemoryComparisonRepository()

    @pytest.fixture
    def mock_audit_sink(self):
        """Create a mock audit sink."""
        return AsyncMock()

    @pytest.fixture
    def use_case(self, repository, mock_audit_sink):
        """Create a use case backed by the in-memory repository."""
        return CalculateComparisonScoresUseCase(
            repository=repository, audit_sink=mock_audit_sink
        )

    @pytest_asyncio.fixture
    async def stored_comparison(self, repository):
        """Persist a comparison over quotes a, b and c."""
        comparison = Comparison.create(
            "tenant-1", "rfq-1", "Monitors", "buyer-1", ["a", "b", "c"]
        )
        return await repository.create(comparison)

    @pytest.mark.asyncio
    async def test_stores_full_analysis(
        self, use_case, repository, stored_comparison, mock_audit_sink
    ):
        comparison = stored_comparison

        result = await use_case.execute("tenant-1", comparison.id, detailed_quotes())

        assert [s.quote_id for s in result.quote_scores] == ["a", "b", "c"]
        assert result.best_overall_quote == "a"
        assert result.best_price_quote == "b"
        assert len(result.price_differences) == 3
        assert len(result.item_comparisons) == 2
        assert result.recommendation.startswith(
            "Based on the analysis of 3 quotes, Quote Q-a from Alpha Medical"
        )

        stored = await repository.get_by_id("tenant-1", comparison.id)
        assert stored.quote_scores == result.quote_scores
        assert mock_audit_sink.record.await_args.args[0].action == (
            "comparison.scores_calculated"
        )

    @pytest.mark.asyncio
    async def test_uses_comparison_weights(
        self, use_case, repository, stored_comparison
    ):
        comparison = stored_comparison
        comparison.update_scoring_criteria(
            ScoringCriteria(
                price_weight=100,
                quality_weight=0,
                delivery_weight=0,
                compliance_weight=0,
            )
        )
        await repository.update(comparison)

        result = await use_case.execute("tenant-1", comparison.id, bare_quote_pair())

        assert [s.overall_score for s in result.quote_scores] == [100.0, 0.0]

    @pytest.mark.asyncio
    async def test_recalculation_replaces_previous_results(
        self, use_case, stored_comparison
    ):
        comparison = stored_comparison
        await use_case.execute("tenant-1", comparison.id, detailed_quotes())

        result = await use_case.execute("tenant-1", comparison.id, bare_quote_pair())

        assert [s.quote_id for s in result.quote_scores] == ["a", "b"]
        assert len(result.price_differences) == 2
        assert result.item_comparisons == []

    @pytest.mark.asyncio
    async def test_empty_quotes_rejected_without_update(
        self, repository, stored_comparison
    ):
        comparison = stored_comparison
        mock_repository = AsyncMock()
        mock_repository.get_by_id.return_value = comparison
        use_case = CalculateComparisonScoresUseCase(repository=mock_repository)

        with pytest.raises(NoQuotesError):
            await use_case.execute("tenant-1", comparison.id, [])

        mock_repository.update.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unknown_comparison(self, use_case):
        with pytest.raises(ComparisonNotFoundError):
            await use_case.execute("tenant-1", "missing", detailed_quotes())

    @pytest.mark.asyncio
    async def test_uses_injected_ranker(self, repository, stored_comparison):
        comparison = stored_comparison
        ranker = MagicMock(wraps=ComparisonRanker())
        use_case = CalculateComparisonScoresUseCase(
            repository=repository, ranker=ranker
        )

        await use_case.execute("tenant-1", comparison.id, bare_quote_pair())

        ranker.analyze.assert_called_once()
