"""API route registration."""

from fastapi import APIRouter, FastAPI

from scorekeeper.observability.logging import get_logger

logger = get_logger(__name__)


def create_v1_router() -> APIRouter:
    """Create the v1 API router with all record routes."""
    router = APIRouter(prefix="/v1")

    from scorekeeper.api.routes.records import router as records_router

    router.include_router(records_router, tags=["Records"])
    return router


def register_routes(app: FastAPI, metrics_enabled: bool = True) -> None:
    """Register all routes with the FastAPI application."""
    app.include_router(create_v1_router())

    from scorekeeper.api.routes.health import metrics_router
    from scorekeeper.api.routes.health import router as health_router

    app.include_router(health_router, tags=["Health"])
    if metrics_enabled:
        app.include_router(metrics_router, tags=["Health"])

    logger.debug("routes_registered", metrics_enabled=metrics_enabled)
