"""
Tests for the event status state machine and the public projection
"""

from datetime import timedelta

import pytest

from event_hub.events import (
    FORBIDDEN_TRANSITIONS,
    is_publicly_visible,
    is_transition_allowed,
    to_public_event,
    validate_status_transition,
)
from event_hub.schema import EventStatus
from event_hub.utils import InvalidTransitionError

from tests.helpers import make_event

DRAFT = EventStatus.DRAFT
PUBLISHED = EventStatus.PUBLISHED
CANCELLED = EventStatus.CANCELLED


@pytest.mark.parametrize("current,new", [
    (DRAFT, PUBLISHED),
    (DRAFT, CANCELLED),
    (PUBLISHED, CANCELLED),
    (DRAFT, DRAFT),
    (PUBLISHED, PUBLISHED),
    (CANCELLED, CANCELLED),
])
def test_allowed_transitions(current, new):
    assert is_transition_allowed(current, new)
    validate_status_transition(current, new)


@pytest.mark.parametrize("current,new", [
    (PUBLISHED, DRAFT),
    (CANCELLED, DRAFT),
    (CANCELLED, PUBLISHED),
])
def test_forbidden_transitions(current, new):
    assert not is_transition_allowed(current, new)
    with pytest.raises(InvalidTransitionError) as exc_info:
        validate_status_transition(current, new)

    error = exc_info.value
    assert error.code == "INVALID_TRANSITION"
    assert error.status_code == 400
    assert error.message == f"Cannot transition from {current.value} to {new.value}"
    assert error.details == [
        {"field": "status", "message": f"Cannot move from {current.value} back to {new.value}"}
    ]


def test_every_status_has_a_table_entry():
    assert set(FORBIDDEN_TRANSITIONS) == set(EventStatus)


def test_public_visibility():
    assert not is_publicly_visible(make_event("a", 3, status=DRAFT))
    assert is_publicly_visible(make_event("b", 3, status=PUBLISHED))
    assert is_publicly_visible(make_event("c", 3, status=CANCELLED))


def test_projection_drops_private_fields():
    event = make_event("a", 3).model_copy(
        update={"internal_notes": "secret", "created_by": "admin@example.com"}
    )

    body = to_public_event(event).model_dump(by_alias=True)

    assert set(body) == {"id", "title", "startAt", "endAt", "location", "status", "isUpcoming"}
    assert "secret" not in str(body)


def test_projection_is_upcoming_uses_reference_time():
    event = make_event("a", 3)

    assert to_public_event(event).is_upcoming is True
    assert to_public_event(event, now=event.start_at).is_upcoming is False
    assert to_public_event(event, now=event.start_at - timedelta(seconds=1)).is_upcoming is True
