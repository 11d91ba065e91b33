"""Health check and metrics endpoints."""

from fastapi import APIRouter, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from scorekeeper.api.dependencies import RecordStoreDep

router = APIRouter()
metrics_router = APIRouter()


@router.get("/health")
async def health_check(store: RecordStoreDep) -> dict[str, str]:
    """Report liveness and the configured store backend."""
    return {"status": "ok", "backend": store.backend}


@metrics_router.get("/metrics")
async def metrics() -> Response:
    """Expose Prometheus metrics."""
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
