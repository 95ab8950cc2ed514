"""Health check endpoints router for monitoring service availability."""

from datetime import UTC, datetime
from typing import Any

from fastapi import APIRouter, Request
from starlette.responses import JSONResponse

from src.specials_api.api.http.app_data import ApplicationDependencies

router = APIRouter(prefix="/health", tags=["health"])


def iso_timestamp(moment: datetime | None = None) -> str:
    """UTC ISO 8601 with milliseconds and a ``Z`` suffix."""
    moment = moment or datetime.now(UTC)
    return moment.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


@router.get("")
async def health() -> dict[str, str]:
    """Liveness probe: 200 as long as the process is running."""
    return {"status": "ok", "timestamp": iso_timestamp()}


@router.get("/ready", response_model=None)
async def readiness(request: Request) -> dict[str, Any] | JSONResponse:
    """Readiness probe: 200 when the database answers, 503 otherwise."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    db_healthy = app_deps.database_service.health_check()

    response = {
        "status": "ready" if db_healthy else "not_ready",
        "checks": {
            "database": {
                "status": "healthy" if db_healthy else "unhealthy",
                "pool": app_deps.database_service.get_pool_status(),
            },
        },
    }
    if not db_healthy:
        return JSONResponse(status_code=503, content=response)
    return response
