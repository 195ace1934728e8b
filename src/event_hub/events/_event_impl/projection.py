"""
@file_name: projection.py
@author: NetMind.AI
@date: 2025-12-22
@description: Public projection of Events

Only PUBLISHED and CANCELLED events are publicly visible. The projection copies
an explicit allow-list of fields, so private fields can never leak through it.
"""

from datetime import datetime
from typing import FrozenSet, Optional

from event_hub.schema.event_schema import Event, EventStatus, PublicEvent
from event_hub.utils.timezone import is_in_future


PUBLIC_STATUSES: FrozenSet[EventStatus] = frozenset({EventStatus.PUBLISHED, EventStatus.CANCELLED})


def is_publicly_visible(event: Event) -> bool:
    return event.status in PUBLIC_STATUSES


def to_public_event(event: Event, now: Optional[datetime] = None) -> PublicEvent:
    """Build the public view; isUpcoming is evaluated against now"""
    return PublicEvent(
        id=event.id,
        title=event.title,
        start_at=event.start_at,
        end_at=event.end_at,
        location=event.location,
        status=event.status,
        is_upcoming=is_in_future(event.start_at, now),
    )
