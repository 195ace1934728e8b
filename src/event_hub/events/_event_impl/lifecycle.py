"""
@file_name: lifecycle.py
@author: NetMind.AI
@date: 2025-12-22
@description: Event status state machine

The transition table lists, for each current status, the targets that are
forbidden. Anything not listed is allowed:

    DRAFT     -> (none forbidden)     DRAFT may publish or cancel
    PUBLISHED -> DRAFT                PUBLISHED may only cancel
    CANCELLED -> DRAFT, PUBLISHED     CANCELLED is terminal

Same-status requests are not transitions and are never checked. Creation
bypasses the table entirely.
"""

from typing import Dict, FrozenSet

from event_hub.schema.event_schema import EventStatus
from event_hub.utils.exceptions import InvalidTransitionError


FORBIDDEN_TRANSITIONS: Dict[EventStatus, FrozenSet[EventStatus]] = {
    EventStatus.DRAFT: frozenset(),
    EventStatus.PUBLISHED: frozenset({EventStatus.DRAFT}),
    EventStatus.CANCELLED: frozenset({EventStatus.DRAFT, EventStatus.PUBLISHED}),
}


def is_transition_allowed(current_status: EventStatus, new_status: EventStatus) -> bool:
    """True when moving current_status -> new_status is permitted (or is a no-op)"""
    if current_status == new_status:
        return True
    return new_status not in FORBIDDEN_TRANSITIONS[current_status]


def validate_status_transition(current_status: EventStatus, new_status: EventStatus) -> None:
    """
    Reject forbidden status changes

    Raises:
        InvalidTransitionError: If the table forbids the move
    """
    if not is_transition_allowed(current_status, new_status):
        raise InvalidTransitionError(current_status, new_status)
