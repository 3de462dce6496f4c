"""
Health check endpoints for the application.
"""

from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import APIRouter, HTTPException, status
from fastapi.responses import Response

from skillswap.api.dependencies import HealthCheckerDep
from skillswap.config.logging import get_logger
from skillswap.infrastructure.monitoring.metrics import get_metrics, get_metrics_content_type

logger = get_logger(__name__)
router = APIRouter(prefix="/health", tags=["health"])
metrics_router = APIRouter(prefix="/health", tags=["health"])


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


@router.get("")
async def health_check(health_checker: HealthCheckerDep) -> Dict[str, Any]:
    """Overall health including the document store."""
    return await health_checker.get_overall_health()


@router.get("/ready")
async def readiness_check(health_checker: HealthCheckerDep) -> Dict[str, Any]:
    """Readiness check for orchestrators."""
    is_ready = await health_checker.check_readiness()
    if not is_ready:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Service not ready",
        )

    return {"status": "ready", "timestamp": _now()}


@router.get("/live")
async def liveness_check() -> Dict[str, Any]:
    """Liveness check for orchestrators."""
    return {"status": "alive", "timestamp": _now()}


@metrics_router.get("/metrics")
async def prometheus_metrics() -> Response:
    """Prometheus metrics endpoint."""
    logger.debug("Prometheus metrics requested")
    return Response(content=get_metrics(), media_type=get_metrics_content_type())
