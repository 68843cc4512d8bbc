"""Observability API endpoints: health check and Prometheus metrics."""

from fastapi import APIRouter, Request, Response
from fastapi.responses import JSONResponse
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from .health import HealthStatus, check_database_health

router = APIRouter(tags=["Observability"])


@router.get(
    "/metrics",
    summary="Prometheus metrics endpoint",
    include_in_schema=False,
)
def metrics():
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)


@router.get(
    "/health",
    summary="Health check endpoint",
    description="Returns 200 when the database is reachable, 503 otherwise",
)
def health_check(request: Request):
    """Check database reachability.

    Returns:
        {"success": bool, "data": {"status": ..., "database": {...}}}
    """
    database = check_database_health(request.app.state.database)
    healthy = database.status == HealthStatus.HEALTHY

    return JSONResponse(
        status_code=200 if healthy else 503,
        content={
            "success": healthy,
            "data": {
                "status": "ok" if healthy else "degraded",
                "database": {
                    "status": database.status.value,
                    "message": database.message,
                    "latency_ms": database.latency_ms,
                },
            },
        },
    )
