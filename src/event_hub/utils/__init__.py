"""
Utils Package

@file_name: __init__.py
@description: Utility modules for event_hub

Exports:
- Timezone helpers: utc_now, parse_iso_datetime, format_for_api, ...
- Custom exceptions: EventHubError and its subclasses
- Logging setup: setup_logging
- Background tasks: BackgroundTasks
"""

# Timezone utilities
from event_hub.utils.timezone import (
    utc_now,
    ensure_utc,
    parse_iso_datetime,
    parse_calendar_date,
    format_for_api,
    format_date_for_display,
    format_time_for_display,
    is_in_future,
    is_date_in_range,
    seconds_since,
)

# Custom exceptions
from event_hub.utils.exceptions import (
    # Base
    EventHubError,
    # Request errors
    EventValidationError,
    UnauthorizedError,
    # Domain errors
    EventNotFoundError,
    InvalidTransitionError,
)

# Logging
from event_hub.utils.logging_config import setup_logging

# Background tasks
from event_hub.utils.background import BackgroundTasks

__all__ = [
    # Timezone utilities
    "utc_now",
    "ensure_utc",
    "parse_iso_datetime",
    "parse_calendar_date",
    "format_for_api",
    "format_date_for_display",
    "format_time_for_display",
    "is_in_future",
    "is_date_in_range",
    "seconds_since",
    # Exceptions
    "EventHubError",
    "EventValidationError",
    "UnauthorizedError",
    "EventNotFoundError",
    "InvalidTransitionError",
    # Logging
    "setup_logging",
    # Background tasks
    "BackgroundTasks",
]
