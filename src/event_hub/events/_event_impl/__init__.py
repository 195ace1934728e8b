"""
Event implementation modules

- lifecycle: status transition table and validator
- projection: public view of an Event
"""

from .lifecycle import (
    FORBIDDEN_TRANSITIONS,
    is_transition_allowed,
    validate_status_transition,
)
from .projection import (
    PUBLIC_STATUSES,
    is_publicly_visible,
    to_public_event,
)

__all__ = [
    "FORBIDDEN_TRANSITIONS",
    "is_transition_allowed",
    "validate_status_transition",
    "PUBLIC_STATUSES",
    "is_publicly_visible",
    "to_public_event",
]
