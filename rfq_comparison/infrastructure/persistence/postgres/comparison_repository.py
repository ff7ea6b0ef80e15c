"""PostgreSQL implementation of ComparisonRepositoryPort.

This module provides the concrete implementation of the Comparison repository
using PostgreSQL with async SQLAlchemy.
"""

import structlog
from sqlalchemy import delete, func, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from rfq_comparison.application.ports.comparison_repository import (
    ComparisonRepositoryPort,
    ListCriteria,
    ListResult,
)
from rfq_comparison.domain.entities.comparison import Comparison
from rfq_comparison.infrastructure.persistence.postgres.models import ComparisonModel
from rfq_comparison.shared.exceptions import ComparisonNotFoundError
from rfq_comparison.shared.exceptions.infrastructure_exceptions import DatabaseError

logger = structlog.get_logger(__name__)

_SORT_COLUMNS = {
    "created_at": ComparisonModel.created_at,
    "updated_at": ComparisonModel.updated_at,
    "title": ComparisonModel.title,
}


class PostgresComparisonRepository(ComparisonRepositoryPort):
    """PostgreSQL implementation of Comparison repository.

    The repository flushes but never commits; transaction boundaries belong to
    the session owner.
    """

    def __init__(self, session: AsyncSession):
        """Initialize repository with database session.

        Args:
            session: AsyncSession instance for database operations
        """
        self.session = session

    async def create(self, comparison: Comparison) -> Comparison:
        """Persist a new comparison.

        Args:
            comparison: The comparison to save

        Returns:
            The saved comparison

        Raises:
            DatabaseError: If the insert fails
        """
        try:
            self.session.add(ComparisonModel.from_domain_entity(comparison))
            await self.session.flush()
        except SQLAlchemyError as e:
            logger.error(
                "comparison_create_failed", comparison_id=comparison.id, error=str(e)
            )
            raise DatabaseError(f"Failed to create comparison: {e}") from e

        logger.info(
            "comparison_persisted",
            comparison_id=comparison.id,
            tenant_id=comparison.tenant_id,
        )
        return comparison

    async def get_by_id(self, tenant_id: str, comparison_id: str) -> Comparison:
        """Retrieve a comparison by ID within a tenant.

        Raises:
            ComparisonNotFoundError: If the comparison does not exist
        """
        stmt = select(ComparisonModel).where(
            ComparisonModel.tenant_id == tenant_id,
            ComparisonModel.id == comparison_id,
        )
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            raise DatabaseError(f"Failed to load comparison: {e}") from e

        db_comparison = result.scalar_one_or_none()
        if db_comparison is None:
            raise ComparisonNotFoundError(comparison_id)
        return db_comparison.to_domain_entity()

    async def get_by_rfq(self, tenant_id: str, rfq_id: str) -> list[Comparison]:
        """Retrieve all comparisons for an RFQ, newest first."""
        stmt = (
            select(ComparisonModel)
            .where(
                ComparisonModel.tenant_id == tenant_id,
                ComparisonModel.rfq_id == rfq_id,
            )
            .order_by(ComparisonModel.created_at.desc())
        )
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            raise DatabaseError(f"Failed to load comparisons: {e}") from e

        return [row.to_domain_entity() for row in result.scalars().all()]

    async def list_comparisons(self, criteria: ListCriteria) -> ListResult:
        """List comparisons with filters, sorting and paging.

        Args:
            criteria: Filter, sort and paging options

        Returns:
            A page of comparisons with the total match count
        """
        conditions = [ComparisonModel.tenant_id == criteria.tenant_id]
        if criteria.rfq_id:
            conditions.append(ComparisonModel.rfq_id == criteria.rfq_id)
        if criteria.status:
            conditions.append(
                ComparisonModel.status.in_([s.value for s in criteria.status])
            )
        if criteria.created_by:
            conditions.append(ComparisonModel.created_by == criteria.created_by)

        sort_column = _SORT_COLUMNS[criteria.sort_by]
        if criteria.sort_direction == "asc":
            order = sort_column.asc()
        else:
            order = sort_column.desc()

        count_stmt = (
            select(func.count()).select_from(ComparisonModel).where(*conditions)
        )
        page_stmt = (
            select(ComparisonModel)
            .where(*conditions)
            .order_by(order, ComparisonModel.id)
            .offset(criteria.offset)
            .limit(criteria.page_size)
        )

        try:
            total = (await self.session.execute(count_stmt)).scalar_one()
            rows = (await self.session.execute(page_stmt)).scalars().all()
        except SQLAlchemyError as e:
            raise DatabaseError(f"Failed to list comparisons: {e}") from e

        logger.debug(
            "comparisons_queried",
            tenant_id=criteria.tenant_id,
            total=total,
            page=criteria.page,
        )
        return ListResult.paginate(
            [row.to_domain_entity() for row in rows], total, criteria
        )

    async def update(self, comparison: Comparison) -> Comparison:
        """Overwrite the stored comparison (last write wins).

        Raises:
            ComparisonNotFoundError: If the comparison does not exist
        """
        values = ComparisonModel.column_values(comparison)
        values.pop("id")
        values.pop("tenant_id")

        stmt = (
            update(ComparisonModel)
            .where(
                ComparisonModel.tenant_id == comparison.tenant_id,
                ComparisonModel.id == comparison.id,
            )
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            logger.error(
                "comparison_update_failed", comparison_id=comparison.id, error=str(e)
            )
            raise DatabaseError(f"Failed to update comparison: {e}") from e

        if result.rowcount == 0:
            raise ComparisonNotFoundError(comparison.id)

        self.session.expire_all()
        return comparison

    async def delete(self, tenant_id: str, comparison_id: str) -> None:
        """Delete a comparison.

        Raises:
            ComparisonNotFoundError: If the comparison does not exist
        """
        stmt = (
            delete(ComparisonModel)
            .where(
                ComparisonModel.tenant_id == tenant_id,
                ComparisonModel.id == comparison_id,
            )
            .execution_options(synchronize_session=False)
        )
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            raise DatabaseError(f"Failed to delete comparison: {e}") from e

        if result.rowcount == 0:
            raise ComparisonNotFoundError(comparison_id)
        self.session.expire_all()
