"""
Main FastAPI application module for the RFQ comparison API.

This module initializes and configures the FastAPI application instance,
following hexagonal architecture principles where the API layer serves
as an inbound adapter for external HTTP interactions.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI

from rfq_comparison.interfaces.api.dependencies import shutdown_dependencies
from rfq_comparison.interfaces.api.exception_handlers import (
    register_exception_handlers,
)
from rfq_comparison.interfaces.api.v1.routers import comparisons, health
from rfq_comparison.shared.config.settings import get_settings
from rfq_comparison.shared.utils.logger import configure_logging

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """
    Manages application lifecycle events.

    Database connections are initialized lazily on first use.

    Args:
        app: The FastAPI application instance

    Yields:
        None
    """
    logger.info("application_started", version=app.version)

    yield

    await shutdown_dependencies()
    logger.info("application_stopped")


def create_application() -> FastAPI:
    """
    Creates and configures the FastAPI application instance.

    Returns:
        FastAPI: Configured FastAPI application
    """
    settings = get_settings()
    configure_logging(settings.monitoring.log_level)

    app = FastAPI(
        title="RFQ Comparison API",
        description=(
            "Side-by-side comparison of supplier quotes for an RFQ. Quotes are "
            "scored on price, quality, delivery and compliance, ranked, and "
            "summarized into an award recommendation."
        ),
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    # Register routers
    app.include_router(
        health.router,
        tags=["Health"],
    )
    app.include_router(
        comparisons.router,
        prefix="/api/v1/comparisons",
        tags=["Comparisons"],
    )

    # Register exception handlers
    register_exception_handlers(app)

    return app


# Create the application instance
app = create_application()


if __name__ == "__main__":
    import uvicorn

    api_settings = get_settings().api
    uvicorn.run(
        "rfq_comparison.interfaces.api.main:app",
        host=api_settings.api_host,
        port=api_settings.api_port,
        reload=api_settings.api_reload,
        log_level="info",
    )
