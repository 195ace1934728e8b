"""
@file_name: query_engine.py
@author: NetMind.AI
@date: 2025-12-02
@description: Event query pipeline - filter, sort, count, paginate

Pure functions over a snapshot of events. The pipeline always runs in this order:
1. Date filter      startAt within [dateFrom 00:00:00.000, dateTo 23:59:59.999] (UTC days)
2. Location filter  case-insensitive substring, any of the supplied values
3. Status filter    membership in the supplied set
4. Sort             startAt descending, ties keep insertion order
5. Count            over steps 1-3, independent of sorting
6. Paginate         slice [(page-1)*limit, page*limit), empty when out of range

Usage:
    result = run_query(events, params)
    result.items, result.total, result.total_pages
"""

import math
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

from event_hub.schema.event_schema import (
    DEFAULT_PAGE_LIMIT,
    MAX_PAGE_LIMIT,
    Event,
    EventQueryParams,
)
from event_hub.utils.timezone import is_date_in_range


@dataclass(frozen=True)
class QueryResult:
    """One page of matching events plus the pre-pagination total"""
    items: List[Event]
    total: int
    page: int
    limit: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.limit) if self.limit else 0


# =============================================================================
# Predicates
# =============================================================================

def _matches_dates(event: Event, params: EventQueryParams) -> bool:
    if params.date_from is None and params.date_to is None:
        return True
    return is_date_in_range(event.start_at, params.date_from, params.date_to)


def _matches_locations(event: Event, params: EventQueryParams) -> bool:
    if not params.locations:
        return True
    location = event.location.lower()
    return any(needle.lower() in location for needle in params.locations)


def _matches_status(event: Event, params: EventQueryParams) -> bool:
    if not params.status:
        return True
    return event.status in params.status


def matches(event: Event, params: EventQueryParams) -> bool:
    """The single filter predicate shared by listing and counting"""
    return (
        _matches_dates(event, params)
        and _matches_locations(event, params)
        and _matches_status(event, params)
    )


# =============================================================================
# Pipeline stages
# =============================================================================

def filter_events(events: Iterable[Event], params: EventQueryParams) -> List[Event]:
    return [event for event in events if matches(event, params)]


def sort_events(events: Sequence[Event]) -> List[Event]:
    """Most recent / future-most first; sorted() is stable, so equal startAt keeps input order"""
    return sorted(events, key=lambda event: event.start_at, reverse=True)


def count_events(events: Iterable[Event], params: EventQueryParams) -> int:
    return sum(1 for event in events if matches(event, params))


def effective_limit(limit: Optional[int]) -> int:
    if not limit:
        return DEFAULT_PAGE_LIMIT
    return min(limit, MAX_PAGE_LIMIT)


def paginate(events: Sequence[Event], page: int, limit: int) -> List[Event]:
    start = (max(page, 1) - 1) * limit
    return list(events[start:start + limit])


def run_query(events: Sequence[Event], params: EventQueryParams) -> QueryResult:
    """
    Run the full pipeline

    Args:
        events: Snapshot in insertion order
        params: Filter and pagination parameters

    Returns:
        QueryResult with the requested page and the total match count
    """
    limit = effective_limit(params.limit)
    page = params.page or 1
    ordered = sort_events(filter_events(events, params))
    return QueryResult(
        items=paginate(ordered, page, limit),
        total=count_events(events, params),
        page=page,
        limit=limit,
    )
