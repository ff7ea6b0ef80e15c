"""Comparison Repository Port interface."""

import math
from abc import ABC, abstractmethod
from typing import Literal

from pydantic import BaseModel, Field

from rfq_comparison.domain.entities.comparison import Comparison, ComparisonStatus


class ListCriteria(BaseModel):
    """Filtering, sorting and paging options for listing comparisons."""

    tenant_id: str = Field(..., min_length=1)
    rfq_id: str | None = None
    status: list[ComparisonStatus] = Field(default_factory=list)
    created_by: str | None = None
    sort_by: Literal["created_at", "updated_at", "title"] = "created_at"
    sort_direction: Literal["asc", "desc"] = "desc"
    page: int = Field(default=1, ge=1)
    page_size: int = Field(default=20, ge=1, le=100)

    @property
    def offset(self) -> int:
        """Number of rows to skip for the requested page."""
        return (self.page - 1) * self.page_size


class ListResult(BaseModel):
    """A page of comparisons."""

    comparisons: list[Comparison] = Field(default_factory=list)
    total: int = 0
    page: int = 1
    page_size: int = 20
    total_pages: int = 0

    @classmethod
    def paginate(
        cls, comparisons: list[Comparison], total: int, criteria: ListCriteria
    ) -> "ListResult":
        """Build a result page from already-sliced rows."""
        return cls(
            comparisons=comparisons,
            total=total,
            page=criteria.page,
            page_size=criteria.page_size,
            total_pages=math.ceil(total / criteria.page_size) if total else 0,
        )


class ComparisonRepositoryPort(ABC):
    """Port interface for Comparison repository operations.

    Every lookup is scoped to a tenant; a comparison owned by another tenant
    is indistinguishable from a missing one.
    """

    @abstractmethod
    async def create(self, comparison: Comparison) -> Comparison:
        """Persist a new comparison.

        Args:
            comparison: The comparison to save

        Returns:
            The saved comparison
        """
        pass

    @abstractmethod
    async def get_by_id(self, tenant_id: str, comparison_id: str) -> Comparison:
        """Retrieve a comparison by ID.

        Args:
            tenant_id: Owning tenant
            comparison_id: The comparison ID

        Returns:
            The comparison

        Raises:
            ComparisonNotFoundError: If no such comparison exists for the tenant
        """
        pass

    @abstractmethod
    async def get_by_rfq(self, tenant_id: str, rfq_id: str) -> list[Comparison]:
        """Retrieve all comparisons for an RFQ, newest first.

        Args:
            tenant_id: Owning tenant
            rfq_id: The RFQ ID

        Returns:
            List of comparisons, possibly empty
        """
        pass

    @abstractmethod
    async def list_comparisons(self, criteria: ListCriteria) -> ListResult:
        """List comparisons matching the criteria.

        Args:
            criteria: Filter, sort and paging options

        Returns:
            A page of comparisons
        """
        pass

    @abstractmethod
    async def update(self, comparison: Comparison) -> Comparison:
        """Update an existing comparison (last write wins).

        Args:
            comparison: The comparison to update

        Returns:
            The updated comparison

        Raises:
            ComparisonNotFoundError: If the comparison does not exist
        """
        pass

    @abstractmethod
    async def delete(self, tenant_id: str, comparison_id: str) -> None:
        """Delete a comparison.

        Args:
            tenant_id: Owning tenant
            comparison_id: The comparison ID

        Raises:
            ComparisonNotFoundError: If the comparison does not exist
        """
        pass
