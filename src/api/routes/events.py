"""Event catalog and calendar submission endpoints."""

import time

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import JSONResponse

from api.dependencies import get_calendar_host, get_catalog, verify_api_key
from api.logging import RequestLog, log_request
from api.models.responses import ErrorCodes, EventResponse, SubmissionResponse
from models.events import OutcomeStatus
from services.calendar import CalendarHost
from services.catalog import EventCatalog, format_event_date
from services.submission import NotificationSlot, submit_and_notify

router = APIRouter(prefix="/v1")

OUTCOME_STATUS_CODES = {
    OutcomeStatus.SAVED: status.HTTP_201_CREATED,
    OutcomeStatus.DENIED: status.HTTP_403_FORBIDDEN,
    OutcomeStatus.SAVE_FAILED: status.HTTP_502_BAD_GATEWAY,
}


def get_client_ip(request: Request) -> str:
    """Extract client IP from request, handling proxies."""
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.client.host if request.client else "unknown"


@router.get("/events", response_model=list[EventResponse])
async def list_events(catalog: EventCatalog = Depends(get_catalog)):
    """List catalog events in order."""
    return [
        EventResponse(
            id=str(event.id),
            title=event.title,
            date=event.date,
            description=event.description,
            display_date=format_event_date(event.date),
        )
        for event in catalog
    ]


@router.post("/events/{event_id}/calendar", response_model=SubmissionResponse)
async def add_event_to_calendar(
    request: Request,
    event_id: str,
    _api_key: str = Depends(verify_api_key),
    catalog: EventCatalog = Depends(get_catalog),
    host: CalendarHost = Depends(get_calendar_host),
):
    """
    Add a catalog event to the calendar.

    Waits for the calendar to grant write access, then saves the event.
    Returns 201 when added, 403 when access is denied, 502 when the save fails.
    """
    start_time = time.time()

    request_log = RequestLog(
        endpoint=f"/v1/events/{event_id}/calendar",
        method="POST",
        client_ip=get_client_ip(request),
        event_id=event_id,
    )

    try:
        event = catalog.get(event_id)
        if event is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail={
                    "error": "Event not found",
                    "code": ErrorCodes.EVENT_NOT_FOUND,
                    "details": [f"Received: {event_id}"],
                },
            )
        request_log.event_title = event.title

        slot = NotificationSlot()
        outcome = await submit_and_notify(event, host, slot)
        notification = slot.take()

        status_code = OUTCOME_STATUS_CODES[outcome.status]
        request_log.outcome = outcome.status.value
        request_log.status_code = status_code
        request_log.error_message = outcome.reason
        request_log.processing_time_ms = int((time.time() - start_time) * 1000)

        return JSONResponse(
            status_code=status_code,
            content=SubmissionResponse(
                outcome=outcome.status.value,
                title=notification.title,
                message=notification.message,
                entry_id=outcome.entry_id,
            ).model_dump(),
        )

    except HTTPException as e:
        request_log.status_code = e.status_code
        if isinstance(e.detail, dict):
            request_log.error_code = e.detail.get("code")
            request_log.error_message = e.detail.get("error")
        else:
            request_log.error_message = str(e.detail)
        request_log.processing_time_ms = int((time.time() - start_time) * 1000)
        raise

    except Exception as e:
        # Unexpected errors
        request_log.status_code = 500
        request_log.error_code = ErrorCodes.INTERNAL_ERROR
        request_log.error_message = str(e)
        request_log.processing_time_ms = int((time.time() - start_time) * 1000)

        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={
                "error": "Internal server error",
                "code": ErrorCodes.INTERNAL_ERROR,
                "details": [],
            },
        )

    finally:
        # Always log the request
        try:
            log_request(request_log)
        except Exception:
            # Don't fail the request if logging fails
            pass
