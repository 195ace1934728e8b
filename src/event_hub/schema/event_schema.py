"""
@file_name: event_schema.py
@author: NetMind.AI
@date: 2025-11-25
@description: Event Schema - Event data model definition

Event is the calendar-like record managed by the admin API:
- Private view (Event): every field, including internal notes and author
- Public view (PublicEvent): a projection without private fields, plus isUpcoming

Event lifecycle:
1. Admin creates the Event (DRAFT unless another status is supplied)
2. Admin PATCHes status / internalNotes (status changes follow the lifecycle table)
3. PUBLISHED and CANCELLED Events become visible through the public API
4. Public clients request a streamed summary of a visible Event

Field names are snake_case in Python and camelCase on the wire (aliases).
"""

from __future__ import annotations

import re
from datetime import date, datetime
from enum import Enum
from typing import Any, List, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationInfo,
    field_serializer,
    field_validator,
    model_validator,
)
from pydantic_core import PydanticCustomError

from event_hub.utils.timezone import (
    format_for_api,
    is_in_future,
    parse_calendar_date,
    parse_iso_datetime,
)


# =============================================================================
# Constants
# =============================================================================

TITLE_MAX_LENGTH = 200
DEFAULT_PAGE_LIMIT = 20
MAX_PAGE_LIMIT = 100

_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


# =============================================================================
# Enums
# =============================================================================

class EventStatus(str, Enum):
    """Event status"""
    DRAFT = "DRAFT"            # Private, editable (default on creation)
    PUBLISHED = "PUBLISHED"    # Publicly visible
    CANCELLED = "CANCELLED"    # Publicly visible, terminal


# =============================================================================
# Shared validators
# =============================================================================

def _parse_instant(value: Any) -> datetime:
    """Accept only strict ISO 8601 UTC strings (or already-parsed datetimes)"""
    if isinstance(value, datetime):
        return value
    if isinstance(value, str):
        try:
            return parse_iso_datetime(value)
        except ValueError:
            pass
    raise PydanticCustomError("iso_datetime", "Must be a valid ISO 8601 datetime")


class _WireModel(BaseModel):
    """Base for models exchanged over the API (camelCase aliases, API datetime format)"""

    model_config = ConfigDict(populate_by_name=True)


# =============================================================================
# Event Models
# =============================================================================

class Event(_WireModel):
    """
    Event data model (private, canonical)

    Invariants enforced at creation only:
    - start_at < end_at
    - start_at is strictly in the future

    Nothing is re-checked later, so an Event may become "past" while DRAFT/PUBLISHED.
    """

    id: str = Field(..., description="Unique Event identifier (UUID)")
    title: str = Field(..., description="Event title (1-200 characters)")
    start_at: datetime = Field(..., alias="startAt", description="Start instant (UTC)")
    end_at: datetime = Field(..., alias="endAt", description="End instant (UTC)")
    location: str = Field(..., description="Free-form location")
    status: EventStatus = Field(default=EventStatus.DRAFT, description="Lifecycle status")
    internal_notes: Optional[str] = Field(
        default=None,
        alias="internalNotes",
        description="Private notes, never exposed publicly"
    )
    created_by: Optional[str] = Field(
        default=None,
        alias="createdBy",
        description="Author email, never exposed publicly"
    )
    updated_at: datetime = Field(..., alias="updatedAt", description="Last mutation instant (UTC)")

    @field_serializer("start_at", "end_at", "updated_at")
    def _serialize_instant(self, value: datetime) -> Optional[str]:
        return format_for_api(value)


class PublicEvent(_WireModel):
    """
    Public projection of an Event

    internal_notes, created_by and updated_at are deliberately absent.
    is_upcoming is computed at projection time (start_at > now).
    """

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    id: str
    title: str
    start_at: datetime = Field(..., alias="startAt")
    end_at: datetime = Field(..., alias="endAt")
    location: str
    status: EventStatus
    is_upcoming: bool = Field(..., alias="isUpcoming")

    @field_serializer("start_at", "end_at")
    def _serialize_instant(self, value: datetime) -> Optional[str]:
        return format_for_api(value)


# =============================================================================
# Request Models
# =============================================================================

class CreateEventRequest(_WireModel):
    """Request body for POST /events"""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    title: str
    start_at: datetime = Field(..., alias="startAt")
    end_at: datetime = Field(..., alias="endAt")
    location: str
    status: Optional[EventStatus] = None
    internal_notes: Optional[str] = Field(default=None, alias="internalNotes")
    created_by: Optional[str] = Field(default=None, alias="createdBy")

    @field_validator("title")
    @classmethod
    def _check_title(cls, value: str) -> str:
        if len(value) < 1:
            raise PydanticCustomError("title_empty", "Title cannot be empty")
        if len(value) > TITLE_MAX_LENGTH:
            raise PydanticCustomError("title_too_long", "Title cannot exceed 200 characters")
        return value

    @field_validator("start_at", "end_at", mode="before")
    @classmethod
    def _check_instant_format(cls, value: Any) -> datetime:
        return _parse_instant(value)

    @field_validator("start_at")
    @classmethod
    def _check_start_in_future(cls, value: datetime) -> datetime:
        if not is_in_future(value):
            raise PydanticCustomError("start_in_past", "Must be in the future")
        return value

    @field_validator("end_at")
    @classmethod
    def _check_end_after_start(cls, value: datetime, info: ValidationInfo) -> datetime:
        # start_at is only present in info.data when it validated successfully
        start_at = info.data.get("start_at")
        if start_at is not None and not start_at < value:
            raise PydanticCustomError("end_before_start", "startAt must be before endAt")
        return value

    @field_validator("location")
    @classmethod
    def _check_location(cls, value: str) -> str:
        if not value:
            raise PydanticCustomError("location_empty", "Location cannot be empty")
        return value

    @field_validator("created_by")
    @classmethod
    def _check_email(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not _EMAIL_PATTERN.match(value):
            raise PydanticCustomError("email", "Invalid email")
        return value


class UpdateEventRequest(_WireModel):
    """
    Request body for PATCH /events/{id}

    Only status and internalNotes are patchable. A field counts as present when
    it appears in the body; an explicit null internalNotes clears the notes.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    status: Optional[EventStatus] = None
    internal_notes: Optional[str] = Field(default=None, alias="internalNotes")

    @model_validator(mode="after")
    def _check_not_empty(self) -> "UpdateEventRequest":
        if not self.has_status and not self.has_internal_notes:
            raise PydanticCustomError("empty_patch", "At least one field must be provided")
        return self

    @property
    def has_status(self) -> bool:
        return self.status is not None

    @property
    def has_internal_notes(self) -> bool:
        return "internal_notes" in self.model_fields_set


class EventQueryParams(_WireModel):
    """
    Listing filter (request-scoped)

    Raw query strings are accepted: locations and status are comma-separated,
    dates are YYYY-MM-DD, limit is clamped to MAX_PAGE_LIMIT.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    date_from: Optional[date] = Field(default=None, alias="dateFrom")
    date_to: Optional[date] = Field(default=None, alias="dateTo")
    locations: Optional[List[str]] = None
    status: Optional[List[EventStatus]] = None
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=DEFAULT_PAGE_LIMIT, ge=1)

    @field_validator("date_from", "date_to", mode="before")
    @classmethod
    def _check_calendar_date(cls, value: Any) -> Any:
        if value is None or isinstance(value, date):
            return value
        if isinstance(value, str):
            try:
                return parse_calendar_date(value)
            except ValueError:
                pass
        raise PydanticCustomError("calendar_date", "Must be a date in YYYY-MM-DD format")

    @field_validator("locations", "status", mode="before")
    @classmethod
    def _split_csv(cls, value: Any) -> Any:
        if isinstance(value, str):
            items = [item.strip() for item in value.split(",")]
            return [item for item in items if item] or None
        return value

    @field_validator("limit")
    @classmethod
    def _clamp_limit(cls, value: int) -> int:
        return min(value, MAX_PAGE_LIMIT)


# =============================================================================
# Response Models
# =============================================================================

class Pagination(_WireModel):
    """Pagination metadata computed with the effective (clamped) limit"""

    page: int
    limit: int
    total: int
    total_pages: int = Field(..., alias="totalPages")


class EventListResponse(_WireModel):
    """Response for GET /events"""

    events: List[Event]
    pagination: Pagination


class PublicEventListResponse(_WireModel):
    """Response for GET /public/events"""

    events: List[PublicEvent]
    pagination: Pagination
