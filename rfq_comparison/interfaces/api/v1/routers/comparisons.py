"""
Comparison API endpoints.

Every route is tenant scoped through the tenant header. Domain errors are
translated to HTTP responses by the application-wide exception handlers.
"""

from typing import Literal

import structlog
from fastapi import APIRouter, Depends, Query, Response, status

from rfq_comparison.application.ports import ListCriteria, ListResult
from rfq_comparison.application.use_cases import (
    CalculateComparisonScoresUseCase,
    CreateComparisonUseCase,
    ManageComparisonUseCase,
    QueryComparisonsUseCase,
)
from rfq_comparison.domain.entities import Comparison, ComparisonStatus
from rfq_comparison.domain.value_objects import Quote
from rfq_comparison.interfaces.api.dependencies import (
    get_calculate_scores_use_case,
    get_create_comparison_use_case,
    get_manage_comparison_use_case,
    get_query_comparisons_use_case,
    get_tenant_id,
    get_user_id,
)
from rfq_comparison.interfaces.api.v1.schemas import (
    AddQuoteRequest,
    CreateComparisonRequest,
    UpdateComparisonRequest,
    UpdateScoringCriteriaRequest,
)
from rfq_comparison.shared.config.settings import get_settings

logger = structlog.get_logger(__name__)
router = APIRouter()


@router.post(
    "",
    response_model=Comparison,
    status_code=status.HTTP_201_CREATED,
    summary="Create a comparison",
)
async def create_comparison(
    request: CreateComparisonRequest,
    tenant_id: str = Depends(get_tenant_id),  # noqa: B008
    user_id: str = Depends(get_user_id),  # noqa: B008
    use_case: CreateComparisonUseCase = Depends(  # noqa: B008
        get_create_comparison_use_case
    ),
) -> Comparison:
    """
    Create a draft comparison over at least two quotes of an RFQ.

    Args:
        request: Comparison details and quote ids
        tenant_id: Tenant from the request header
        user_id: Acting user from the request header
        use_case: Injected create use case

    Returns:
        Comparison: The new draft comparison
    """
    return await use_case.execute(
        tenant_id=tenant_id,
        created_by=user_id,
        rfq_id=request.rfq_id,
        title=request.title,
        quote_ids=request.quote_ids,
        description=request.description,
    )


@router.get("", response_model=ListResult, summary="List comparisons")
async def list_comparisons(
    rfq_id: str | None = Query(None),
    status_filter: list[ComparisonStatus] | None = Query(  # noqa: B008
        None, alias="status"
    ),
    created_by: str | None = Query(None),
    sort_by: Literal["created_at", "updated_at", "title"] = Query("created_at"),
    sort_direction: Literal["asc", "desc"] = Query("desc"),
    page: int = Query(1, ge=1),
    page_size: int | None = Query(None, ge=1, le=100),
    tenant_id: str = Depends(get_tenant_id),  # noqa: B008
    use_case: QueryComparisonsUseCase = Depends(  # noqa: B008
        get_query_comparisons_use_case
    ),
) -> ListResult:
    """
    List comparisons with optional filters, sorting and paging.

    Returns:
        ListResult: A page of comparisons and the total match count
    """
    scoring = get_settings().scoring
    criteria = ListCriteria(
        tenant_id=tenant_id,
        rfq_id=rfq_id,
        status=status_filter or [],
        created_by=created_by,
        sort_by=sort_by,
        sort_direction=sort_direction,
        page=page,
        page_size=min(page_size or scoring.default_page_size, scoring.max_page_size),
    )
    return await use_case.list_comparisons(criteria)


@router.get(
    "/rfq/{rfq_id}",
    response_model=list[Comparison],
    summary="List comparisons for an RFQ",
)
async def get_comparisons_by_rfq(
    rfq_id: str,
    tenant_id: str = Depends(get_tenant_id),  # noqa: B008
    use_case: QueryComparisonsUseCase = Depends(  # noqa: B008
        get_query_comparisons_use_case
    ),
) -> list[Comparison]:
    return await use_case.get_by_rfq(tenant_id, rfq_id)


@router.get("/{comparison_id}", response_model=Comparison, summary="Get a comparison")
async def get_comparison(
    comparison_id: str,
    tenant_id: str = Depends(get_tenant_id),  # noqa: B008
    use_case: QueryComparisonsUseCase = Depends(  # noqa: B008
        get_query_comparisons_use_case
    ),
) -> Comparison:
    return await use_case.get(tenant_id, comparison_id)


@router.patch(
    "/{comparison_id}", response_model=Comparison, summary="Update comparison details"
)
async def update_comparison(
    comparison_id: str,
    request: UpdateComparisonRequest,
    tenant_id: str = Depends(get_tenant_id),  # noqa: B008
    user_id: str = Depends(get_user_id),  # noqa: B008
    use_case: ManageComparisonUseCase = Depends(  # noqa: B008
        get_manage_comparison_use_case
    ),
) -> Comparison:
    return await use_case.update_details(
        tenant_id,
        comparison_id,
        title=request.title,
        description=request.description,
        notes=request.notes,
        actor=user_id,
    )


@router.put(
    "/{comparison_id}/criteria",
    response_model=Comparison,
    summary="Replace scoring weights",
)
async def update_scoring_criteria(
    comparison_id: str,
    request: UpdateScoringCriteriaRequest,
    tenant_id: str = Depends(get_tenant_id),  # noqa: B008
    user_id: str = Depends(get_user_id),  # noqa: B008
    use_case: ManageComparisonUseCase = Depends(  # noqa: B008
        get_manage_comparison_use_case
    ),
) -> Comparison:
    """
    Replace the scoring weights. Existing scores are kept until recalculated.

    Raises:
        InvalidWeightsError: 400 if the weights do not sum to 100
    """
    return await use_case.update_scoring_criteria(
        tenant_id, comparison_id, request.to_domain(), actor=user_id
    )


@router.post(
    "/{comparison_id}/quotes",
    response_model=Comparison,
    summary="Add a quote to a comparison",
)
async def add_quote(
    comparison_id: str,
    request: AddQuoteRequest,
    tenant_id: str = Depends(get_tenant_id),  # noqa: B008
    user_id: str = Depends(get_user_id),  # noqa: B008
    use_case: ManageComparisonUseCase = Depends(  # noqa: B008
        get_manage_comparison_use_case
    ),
) -> Comparison:
    return await use_case.add_quote(
        tenant_id, comparison_id, request.quote_id, actor=user_id
    )


@router.delete(
    "/{comparison_id}/quotes/{quote_id}",
    response_model=Comparison,
    summary="Remove a quote from a comparison",
)
async def remove_quote(
    comparison_id: str,
    quote_id: str,
    tenant_id: str = Depends(get_tenant_id),  # noqa: B008
    user_id: str = Depends(get_user_id),  # noqa: B008
    use_case: ManageComparisonUseCase = Depends(  # noqa: B008
        get_manage_comparison_use_case
    ),
) -> Comparison:
    return await use_case.remove_quote(
        tenant_id, comparison_id, quote_id, actor=user_id
    )


@router.post(
    "/{comparison_id}/calculate",
    response_model=Comparison,
    summary="Score the supplied quotes",
)
async def calculate_scores(
    comparison_id: str,
    quotes: list[Quote],
    tenant_id: str = Depends(get_tenant_id),  # noqa: B008
    use_case: CalculateComparisonScoresUseCase = Depends(  # noqa: B008
        get_calculate_scores_use_case
    ),
) -> Comparison:
    """
    Score the supplied quote records and store the results.

    Args:
        comparison_id: Comparison to score
        quotes: Full quote records, as fetched from the quote service
        tenant_id: Tenant from the request header
        use_case: Injected scoring use case

    Returns:
        Comparison: The comparison with scores, price deltas, item comparisons
        and recommendation populated
    """
    logger.info(
        "calculate_scores_requested",
        comparison_id=comparison_id,
        quote_count=len(quotes),
    )
    return await use_case.execute(tenant_id, comparison_id, quotes)


@router.post(
    "/{comparison_id}/activate",
    response_model=Comparison,
    summary="Activate a draft comparison",
)
async def activate_comparison(
    comparison_id: str,
    tenant_id: str = Depends(get_tenant_id),  # noqa: B008
    user_id: str = Depends(get_user_id),  # noqa: B008
    use_case: ManageComparisonUseCase = Depends(  # noqa: B008
        get_manage_comparison_use_case
    ),
) -> Comparison:
    return await use_case.activate(tenant_id, comparison_id, actor=user_id)


@router.post(
    "/{comparison_id}/complete",
    response_model=Comparison,
    summary="Complete an active comparison",
)
async def complete_comparison(
    comparison_id: str,
    tenant_id: str = Depends(get_tenant_id),  # noqa: B008
    user_id: str = Depends(get_user_id),  # noqa: B008
    use_case: ManageComparisonUseCase = Depends(  # noqa: B008
        get_manage_comparison_use_case
    ),
) -> Comparison:
    return await use_case.complete(tenant_id, comparison_id, actor=user_id)


@router.post(
    "/{comparison_id}/archive",
    response_model=Comparison,
    summary="Archive a comparison",
)
async def archive_comparison(
    comparison_id: str,
    tenant_id: str = Depends(get_tenant_id),  # noqa: B008
    user_id: str = Depends(get_user_id),  # noqa: B008
    use_case: ManageComparisonUseCase = Depends(  # noqa: B008
        get_manage_comparison_use_case
    ),
) -> Comparison:
    return await use_case.archive(tenant_id, comparison_id, actor=user_id)


@router.delete(
    "/{comparison_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a comparison",
)
async def delete_comparison(
    comparison_id: str,
    tenant_id: str = Depends(get_tenant_id),  # noqa: B008
    user_id: str = Depends(get_user_id),  # noqa: B008
    use_case: ManageComparisonUseCase = Depends(  # noqa: B008
        get_manage_comparison_use_case
    ),
) -> Response:
    await use_case.delete(tenant_id, comparison_id, actor=user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
