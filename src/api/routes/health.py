"""Health check endpoint."""

from datetime import datetime, timezone

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from api.models.responses import HealthResponse
from core.config import API_VERSION, CALENDAR_BACKEND

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request):
    """
    Health check endpoint for monitoring.

    Returns 200 if healthy, 503 if the calendar host could not be created.
    """
    catalog = getattr(request.app.state, "catalog", None)
    calendar_host = getattr(request.app.state, "calendar_host", None)
    event_count = len(catalog) if catalog is not None else 0
    timestamp = datetime.now(timezone.utc).isoformat()

    if calendar_host is not None:
        return HealthResponse(
            status="healthy",
            version=API_VERSION,
            calendar_backend=CALENDAR_BACKEND,
            event_count=event_count,
            timestamp=timestamp,
        )
    else:
        return JSONResponse(
            status_code=503,
            content=HealthResponse(
                status="unhealthy",
                version=API_VERSION,
                calendar_backend=CALENDAR_BACKEND,
                event_count=event_count,
                timestamp=timestamp,
                error=getattr(request.app.state, "calendar_error", None) or "Calendar host not configured",
            ).model_dump(),
        )
