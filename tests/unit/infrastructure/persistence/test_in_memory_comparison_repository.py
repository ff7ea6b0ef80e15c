"""Unit tests for InMemoryComparisonRepository."""

from datetime import timedelta

import pytest

from rfq_comparison.application.ports import ListCriteria
from rfq_comparison.domain.entities import Comparison, ComparisonStatus
from rfq_comparison.infrastructure.persistence.memory.in_memory_comparison_repository import (  # noqa: E501
    InMemoryComparisonRepository,
)
from rfq_comparison.shared.exceptions import ComparisonNotFoundError


def _comparison(title: str, rfq_id: str = "rfq-1", offset_minutes: int = 0, **kw):
    comparison = Comparison.create(
        kw.pop("tenant_id", "tenant-1"),
        rfq_id,
        title,
        kw.pop("created_by", "buyer-1"),
        ["q1", "q2"],
    )
    comparison.created_at = comparison.created_at + timedelta(minutes=offset_minutes)
    return comparison


class TestInMemoryComparisonRepository:
    """Test cases for the in-memory repository."""

    @pytest.fixture
    def repository(self):
        return InMemoryComparisonRepository()

    @pytest.mark.asyncio
    async def test_stored_copy_is_isolated(self, repository):
        comparison = _comparison("A")
        await repository.create(comparison)

        comparison.add_quote("q3")

        stored = await repository.get_by_id("tenant-1", comparison.id)
        assert stored.quote_ids == ["q1", "q2"]

    @pytest.mark.asyncio
    async def test_update_and_delete_unknown(self, repository):
        with pytest.raises(ComparisonNotFoundError):
            await repository.update(_comparison("A"))
        with pytest.raises(ComparisonNotFoundError):
            await repository.delete("tenant-1", "missing")

    @pytest.mark.asyncio
    async def test_tenant_scoping(self, repository):
        comparison = _comparison("A")
        await repository.create(comparison)

        with pytest.raises(ComparisonNotFoundError):
            await repository.get_by_id("tenant-2", comparison.id)
        assert await repository.get_by_rfq("tenant-2", "rfq-1") == []

    @pytest.mark.asyncio
    async def test_get_by_rfq_newest_first(self, repository):
        older = _comparison("old", offset_minutes=-10)
        newer = _comparison("new")
        other = _comparison("other", rfq_id="rfq-2")
        for comparison in (older, newer, other):
            await repository.create(comparison)

        result = await repository.get_by_rfq("tenant-1", "rfq-1")

        assert [c.title for c in result] == ["new", "old"]

    @pytest.mark.asyncio
    async def test_list_filters_sorts_and_pages(self, repository):
        titles = ["delta", "alpha", "charlie", "bravo", "echo"]
        for index, title in enumerate(titles):
            await repository.create(_comparison(title, offset_minutes=index))
        archived = _comparison("zulu", created_by="buyer-2")
        archived.archive()
        await repository.create(archived)

        first_page = await repository.list_comparisons(
            ListCriteria(
                tenant_id="tenant-1",
                status=[ComparisonStatus.DRAFT],
                sort_by="title",
                sort_direction="asc",
                page=1,
                page_size=2,
            )
        )
        last_page = await repository.list_comparisons(
            ListCriteria(
                tenant_id="tenant-1",
                status=[ComparisonStatus.DRAFT],
                sort_by="title",
                sort_direction="asc",
                page=3,
                page_size=2,
            )
        )
        by_creator = await repository.list_comparisons(
            ListCriteria(tenant_id="tenant-1", created_by="buyer-2")
        )

        assert [c.title for c in first_page.comparisons] == ["alpha", "bravo"]
        assert first_page.total == 5
        assert first_page.total_pages == 3
        assert [c.title for c in last_page.comparisons] == ["echo"]
        assert [c.title for c in by_creator.comparisons] == ["zulu"]

    @pytest.mark.asyncio
    async def test_list_defaults_to_newest_first(self, repository):
        for index, title in enumerate(["first", "second", "third"]):
            await repository.create(_comparison(title, offset_minutes=index))

        result = await repository.list_comparisons(ListCriteria(tenant_id="tenant-1"))

        assert [c.title for c in result.comparisons] == ["third", "second", "first"]

    @pytest.mark.asyncio
    async def test_empty_list(self, repository):
        result = await repository.list_comparisons(ListCriteria(tenant_id="tenant-1"))
        assert result.total == 0
        assert result.total_pages == 0
        assert result.comparisons == []
