"""
Shared test helpers: fake collaborators and request builders
"""

from datetime import timedelta
from typing import List, Optional

from event_hub.schema import Event, EventStatus
from event_hub.utils import format_for_api, utc_now

ADMIN_TOKEN = "test-admin-token"


class SleepRecorder:
    """Stand-in for asyncio.sleep that records the requested delays"""

    def __init__(self):
        self.calls: List[float] = []

    async def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)


class RecordingNotifier:
    """NotificationService that keeps every notification in memory"""

    def __init__(self):
        self.sent: List[tuple] = []

    async def notify_event_created(self, title: str) -> None:
        self.sent.append(("created", title))

    async def notify_event_published(self, title: str) -> None:
        self.sent.append(("published", title))

    async def notify_event_cancelled(self, title: str) -> None:
        self.sent.append(("cancelled", title))


def future_iso(days: int = 30, hours: int = 0) -> str:
    """ISO 8601 UTC string `days` (and `hours`) from now, whole seconds"""
    moment = utc_now().replace(microsecond=0) + timedelta(days=days, hours=hours)
    return format_for_api(moment)


def event_payload(**overrides) -> dict:
    """Valid POST /events body; keyword arguments replace individual fields"""
    payload = {
        "title": "Tech Conference 2027",
        "startAt": future_iso(days=30),
        "endAt": future_iso(days=30, hours=8),
        "location": "San Francisco, CA",
        "internalNotes": "Venue deposit paid",
        "createdBy": "admin@example.com",
    }
    payload.update(overrides)
    return payload


def make_event(
    event_id: str,
    start_days: int,
    location: str = "Berlin",
    status: EventStatus = EventStatus.PUBLISHED,
    title: Optional[str] = None,
) -> Event:
    """Event that starts `start_days` from now (negative for the past)"""
    start = utc_now().replace(microsecond=0) + timedelta(days=start_days)
    return Event(
        id=event_id,
        title=title or f"Event {event_id}",
        start_at=start,
        end_at=start + timedelta(hours=2),
        location=location,
        status=status,
        updated_at=utc_now(),
    )


def sse_data(response) -> List[str]:
    """Payloads of every `data:` line in an SSE body, in order"""
    prefix = "data: "
    return [line[len(prefix):] for line in response.text.splitlines() if line.startswith(prefix)]
