"""
Health check endpoint for API monitoring.

This module provides a simple health check endpoint that can be used
by load balancers and monitoring systems to verify API availability.
"""

from fastapi import APIRouter

from rfq_comparison.interfaces.api.v1.schemas import HealthResponse
from rfq_comparison.shared.config.settings import get_settings

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Check the health status of the API.

    Returns:
        HealthResponse: Health status with service name and version
    """
    settings = get_settings()
    return HealthResponse(
        status="ok",
        service=settings.monitoring.service_name,
        version=settings.app_version,
    )
