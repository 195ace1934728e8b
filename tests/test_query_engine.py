"""
Tests for the listing pipeline (filter, sort, count, paginate)
"""

from datetime import date, datetime, timezone

from event_hub.repository import (
    EventRepository,
    QueryResult,
    count_events,
    effective_limit,
    filter_events,
    paginate,
    run_query,
    sort_events,
)
from event_hub.schema import Event, EventQueryParams, EventStatus

from tests.helpers import make_event


def _event_at(event_id: str, start: datetime, location: str = "Berlin") -> Event:
    return Event(
        id=event_id,
        title=event_id,
        start_at=start,
        end_at=start.replace(hour=23),
        location=location,
        status=EventStatus.PUBLISHED,
        updated_at=start,
    )


def test_sort_is_start_descending_and_stable():
    first = make_event("first", 5)
    tie = first.model_copy(update={"id": "tie"})
    later = make_event("later", 10)

    ordered = sort_events([first, tie, later])

    assert [e.id for e in ordered] == ["later", "first", "tie"]


def test_location_filter_is_case_insensitive_substring_any_of():
    events = [
        make_event("ny", 1, location="New York, NY"),
        make_event("sf", 2, location="San Francisco, CA"),
        make_event("ber", 3, location="Berlin"),
    ]
    params = EventQueryParams(locations=["new york", "FRANCISCO"])

    assert {e.id for e in filter_events(events, params)} == {"ny", "sf"}


def test_status_filter():
    events = [
        make_event("d", 1, status=EventStatus.DRAFT),
        make_event("p", 2, status=EventStatus.PUBLISHED),
        make_event("c", 3, status=EventStatus.CANCELLED),
    ]
    params = EventQueryParams(status=[EventStatus.DRAFT, EventStatus.CANCELLED])

    assert {e.id for e in filter_events(events, params)} == {"d", "c"}


def test_date_range_covers_whole_utc_days():
    events = [
        _event_at("before", datetime(2027, 3, 9, 23, 59, 59, tzinfo=timezone.utc)),
        _event_at("start", datetime(2027, 3, 10, 0, 0, 0, tzinfo=timezone.utc)),
        _event_at("end", datetime(2027, 3, 12, 23, 59, 59, 999000, tzinfo=timezone.utc)),
        _event_at("after", datetime(2027, 3, 13, 0, 0, 0, tzinfo=timezone.utc)),
    ]
    params = EventQueryParams(date_from=date(2027, 3, 10), date_to=date(2027, 3, 12))

    assert [e.id for e in filter_events(events, params)] == ["start", "end"]


def test_open_ended_date_range():
    events = [
        _event_at("early", datetime(2027, 1, 1, 12, tzinfo=timezone.utc)),
        _event_at("late", datetime(2027, 6, 1, 12, tzinfo=timezone.utc)),
    ]

    assert [e.id for e in filter_events(events, EventQueryParams(date_from=date(2027, 2, 1)))] == ["late"]
    assert [e.id for e in filter_events(events, EventQueryParams(date_to=date(2027, 2, 1)))] == ["early"]


def test_count_matches_filter_and_ignores_pagination():
    events = [make_event(str(i), i + 1) for i in range(7)]
    params = EventQueryParams(page=2, limit=3)

    result = run_query(events, params)

    assert count_events(events, params) == 7
    assert result.total == 7
    assert [e.id for e in result.items] == ["3", "2", "1"]
    assert result.total_pages == 3


def test_page_past_the_end_is_empty():
    events = [make_event(str(i), i + 1) for i in range(3)]

    result = run_query(events, EventQueryParams(page=5, limit=2))

    assert result.items == []
    assert result.total == 3


def test_limit_is_clamped():
    params = EventQueryParams(limit=500)

    assert params.limit == 100
    assert effective_limit(params.limit) == 100
    assert effective_limit(None) == 20


def test_paginate_slices():
    events = [make_event(str(i), i + 1) for i in range(5)]

    assert [e.id for e in paginate(events, 1, 2)] == ["0", "1"]
    assert [e.id for e in paginate(events, 3, 2)] == ["4"]


def test_query_result_total_pages():
    assert QueryResult(items=[], total=0, page=1, limit=20).total_pages == 0
    assert QueryResult(items=[], total=41, page=1, limit=20).total_pages == 3


async def test_repository_find_all_and_count():
    repo = EventRepository()
    for i, location in enumerate(["Paris", "Lyon", "Paris"]):
        await repo.create(make_event(f"e{i}", i + 1, location=location))

    params = EventQueryParams(locations=["paris"])

    assert [e.id for e in await repo.find_all(params)] == ["e2", "e0"]
    assert await repo.count(params) == 2
    assert len(repo) == 3


async def test_repository_update_returns_new_instance():
    repo = EventRepository()
    original = await repo.create(make_event("a", 1, status=EventStatus.DRAFT))

    updated = await repo.update("a", {"status": EventStatus.PUBLISHED})

    assert updated.status == EventStatus.PUBLISHED
    assert original.status == EventStatus.DRAFT
    assert await repo.update("missing", {"status": EventStatus.PUBLISHED}) is None
