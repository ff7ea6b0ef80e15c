"""Dependency injection for FastAPI application.

This module provides dependency functions that can be injected
into FastAPI route handlers.
"""

from collections.abc import AsyncGenerator

import structlog
from fastapi import Depends, Request

from rfq_comparison.application.ports import AuditSinkPort, ComparisonRepositoryPort
from rfq_comparison.application.use_cases import (
    CalculateComparisonScoresUseCase,
    CreateComparisonUseCase,
    ManageComparisonUseCase,
    QueryComparisonsUseCase,
)
from rfq_comparison.domain.services import ComparisonRanker
from rfq_comparison.infrastructure.audit.structlog_audit_sink import (
    StructlogAuditSink,
)
from rfq_comparison.infrastructure.persistence.postgres.comparison_repository import (
    PostgresComparisonRepository,
)
from rfq_comparison.infrastructure.persistence.postgres.connection import (
    close_db_connection,
    get_db_connection,
)
from rfq_comparison.shared.config.settings import get_settings
from rfq_comparison.shared.exceptions import ComparisonValidationError

logger = structlog.get_logger(__name__)

DEFAULT_ACTOR = "system"

_ranker = ComparisonRanker()


def get_tenant_id(request: Request) -> str:
    """Read the tenant identifier from the configured request header.

    Raises:
        ComparisonValidationError: If the header is missing or blank
    """
    header = get_settings().api.tenant_header
    tenant_id = request.headers.get(header, "").strip()
    if not tenant_id:
        raise ComparisonValidationError(
            f"{header} header required",
            error_code="MISSING_TENANT",
        )
    return tenant_id


def get_user_id(request: Request) -> str:
    """Read the acting user from the configured header, defaulting to system."""
    header = get_settings().api.user_header
    return request.headers.get(header, "").strip() or DEFAULT_ACTOR


async def get_comparison_repository() -> AsyncGenerator[ComparisonRepositoryPort]:
    """Get a repository bound to a request-scoped session.

    The session commits when the request handler returns and rolls back if
    it raises.

    Yields:
        PostgresComparisonRepository instance
    """
    connection = await get_db_connection()
    async with connection.get_session() as session:
        yield PostgresComparisonRepository(session)


def get_audit_sink() -> AuditSinkPort | None:
    """Get the audit sink, or None when auditing is disabled."""
    if not get_settings().monitoring.audit_enabled:
        return None
    return StructlogAuditSink()


def get_comparison_ranker() -> ComparisonRanker:
    """Get the shared ranking service."""
    return _ranker


def get_create_comparison_use_case(
    repository: ComparisonRepositoryPort = Depends(  # noqa: B008
        get_comparison_repository
    ),
    audit_sink: AuditSinkPort | None = Depends(get_audit_sink),  # noqa: B008
) -> CreateComparisonUseCase:
    return CreateComparisonUseCase(repository=repository, audit_sink=audit_sink)


def get_query_comparisons_use_case(
    repository: ComparisonRepositoryPort = Depends(  # noqa: B008
        get_comparison_repository
    ),
) -> QueryComparisonsUseCase:
    return QueryComparisonsUseCase(repository=repository)


def get_manage_comparison_use_case(
    repository: ComparisonRepositoryPort = Depends(  # noqa: B008
        get_comparison_repository
    ),
    audit_sink: AuditSinkPort | None = Depends(get_audit_sink),  # noqa: B008
) -> ManageComparisonUseCase:
    return ManageComparisonUseCase(repository=repository, audit_sink=audit_sink)


def get_calculate_scores_use_case(
    repository: ComparisonRepositoryPort = Depends(  # noqa: B008
        get_comparison_repository
    ),
    ranker: ComparisonRanker = Depends(get_comparison_ranker),  # noqa: B008
    audit_sink: AuditSinkPort | None = Depends(get_audit_sink),  # noqa: B008
) -> CalculateComparisonScoresUseCase:
    return CalculateComparisonScoresUseCase(
        repository=repository, ranker=ranker, audit_sink=audit_sink
    )


async def shutdown_dependencies() -> None:
    """Cleanup function to close connections on shutdown."""
    await close_db_connection()
    logger.info("dependencies_shutdown")
