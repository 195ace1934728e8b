"""
@file_name: __init__.py
@author: NetMind.AI
@date: 2025-11-28
@description: Repository module - Data access layer abstraction

Responsibilities:
- Encapsulate storage access logic
- Provide unified CRUD interfaces
- Run the event query pipeline over a consistent snapshot

Usage example:
    from event_hub.repository import EventRepository

    repo = EventRepository()
    await repo.create(event)
    events = await repo.find_all(params)
"""

from .base import BaseRepository, InMemoryRepository
from .event_repository import EventRepository
from .query_engine import (
    QueryResult,
    run_query,
    matches,
    filter_events,
    sort_events,
    count_events,
    paginate,
    effective_limit,
)

__all__ = [
    # Base
    "BaseRepository",
    "InMemoryRepository",
    # Event
    "EventRepository",
    # Query engine
    "QueryResult",
    "run_query",
    "matches",
    "filter_events",
    "sort_events",
    "count_events",
    "paginate",
    "effective_limit",
]
