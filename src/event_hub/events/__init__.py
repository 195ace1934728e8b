"""
@file_name: __init__.py
@author: NetMind.AI
@date: 2025-12-22
@description: Event domain package

Usage:
    from event_hub.events import EventService
"""

from .event_service import EventService
from ._event_impl import (
    FORBIDDEN_TRANSITIONS,
    PUBLIC_STATUSES,
    is_transition_allowed,
    validate_status_transition,
    is_publicly_visible,
    to_public_event,
)

__all__ = [
    "EventService",
    "FORBIDDEN_TRANSITIONS",
    "PUBLIC_STATUSES",
    "is_transition_allowed",
    "validate_status_transition",
    "is_publicly_visible",
    "to_public_event",
]
