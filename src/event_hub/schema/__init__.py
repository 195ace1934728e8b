"""
@file_name: __init__.py
@author: NetMind.AI
@date: 2025-11-15
@description: Schema package exports

Centralized management of all data models for convenient reference by other modules

Usage:
    from event_hub.schema import (
        Event,
        EventStatus,
        PublicEvent,
        ...
    )
"""

# ===== Event Schema =====
from .event_schema import (
    # Constants
    TITLE_MAX_LENGTH,
    DEFAULT_PAGE_LIMIT,
    MAX_PAGE_LIMIT,
    # Enums
    EventStatus,
    # Models
    Event,
    PublicEvent,
    # Requests
    CreateEventRequest,
    UpdateEventRequest,
    EventQueryParams,
    # Responses
    Pagination,
    EventListResponse,
    PublicEventListResponse,
)

# ===== API Schema =====
from .api_schema import (
    ErrorDetail,
    ErrorBody,
    ErrorResponse,
    HealthResponse,
)

__all__ = [
    # Event
    "TITLE_MAX_LENGTH",
    "DEFAULT_PAGE_LIMIT",
    "MAX_PAGE_LIMIT",
    "EventStatus",
    "Event",
    "PublicEvent",
    "CreateEventRequest",
    "UpdateEventRequest",
    "EventQueryParams",
    "Pagination",
    "EventListResponse",
    "PublicEventListResponse",
    # API
    "ErrorDetail",
    "ErrorBody",
    "ErrorResponse",
    "HealthResponse",
]
