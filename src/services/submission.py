"""
Calendar submission: permission check, entry insert and user feedback.
"""

from core.config import (
    ACCESS_DENIED_NOTIFICATION,
    SAVE_FAILED_NOTIFICATION,
    SAVED_NOTIFICATION,
)
from models.events import (
    CalendarEntry,
    EventRecord,
    Notification,
    OutcomeStatus,
    SubmissionOutcome,
)
from services.calendar import CalendarHost, CalendarSaveError

NOTIFICATIONS = {
    OutcomeStatus.DENIED: Notification(*ACCESS_DENIED_NOTIFICATION),
    OutcomeStatus.SAVE_FAILED: Notification(*SAVE_FAILED_NOTIFICATION),
    OutcomeStatus.SAVED: Notification(*SAVED_NOTIFICATION),
}


async def submit(event: EventRecord, host: CalendarHost) -> SubmissionOutcome:
    """
    Add one event to the host's default calendar.

    Waits for the host to answer the write access request (possibly after
    prompting the user), then saves a one-hour, single-occurrence entry.

    Returns:
        DENIED if access is refused or the request reported an error,
        SAVE_FAILED with the host's reason if the save fails, SAVED otherwise.
    """
    access = await host.request_write_access()
    if not access.granted or access.error is not None:
        return SubmissionOutcome.denied(access.error)

    entry = CalendarEntry.from_event(event)
    try:
        entry_id = await host.save_event(entry)
    except CalendarSaveError as e:
        return SubmissionOutcome.save_failed(str(e))

    return SubmissionOutcome.saved(entry_id)


def notification_for(outcome: SubmissionOutcome) -> Notification:
    """Map an outcome to its user-visible message."""
    return NOTIFICATIONS[outcome.status]


class NotificationSlot:
    """Holds at most one notification until it is read."""

    def __init__(self):
        self._notification: Notification | None = None

    def __bool__(self) -> bool:
        return self._notification is not None

    def post(self, notification: Notification):
        if self._notification is not None:
            raise RuntimeError("Notification slot already holds an unread notification")
        self._notification = notification

    def take(self) -> Notification:
        if self._notification is None:
            raise LookupError("Notification slot is empty")
        notification, self._notification = self._notification, None
        return notification


async def submit_and_notify(
    event: EventRecord, host: CalendarHost, slot: NotificationSlot
) -> SubmissionOutcome:
    """Submit an event and post the resulting message to the slot."""
    outcome = await submit(event, host)
    slot.post(notification_for(outcome))
    return outcome
