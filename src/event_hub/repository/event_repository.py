"""
@file_name: event_repository.py
@author: NetMind.AI
@date: 2025-12-02
@description: Event Repository - Data access layer for events

Responsibilities:
- Own the canonical Event collection for the process lifetime
- create / update / find_by_id / find_all / count
- No business rules: lifecycle checks and projections live in EventService
"""

from typing import List, Optional

from loguru import logger

from .base import InMemoryRepository
from .query_engine import run_query, count_events
from event_hub.schema.event_schema import Event, EventQueryParams


class EventRepository(InMemoryRepository[Event]):
    """
    In-memory Event repository

    Usage example:
        repo = EventRepository()

        await repo.create(event)
        event = await repo.find_by_id(event_id)
        page = await repo.find_all(EventQueryParams(locations=["New York"]))
        total = await repo.count(EventQueryParams(locations=["New York"]))
    """

    id_field = "id"

    async def find_by_id(self, event_id: str) -> Optional[Event]:
        """
        Get a single Event

        Args:
            event_id: Event ID

        Returns:
            Event or None
        """
        return await self.get_by_id(event_id)

    async def find_all(self, params: EventQueryParams) -> List[Event]:
        """
        Filtered, sorted page of Events

        Args:
            params: Query parameters (status already overridden for public callers)

        Returns:
            The requested page, startAt descending
        """
        snapshot = await self.list_all()
        result = run_query(snapshot, params)
        logger.debug(
            f"    ← EventRepository.find_all: {len(result.items)} of {result.total} "
            f"(page={result.page}, limit={result.limit})"
        )
        return result.items

    async def count(self, params: EventQueryParams) -> int:
        """Number of Events matching the filters, ignoring pagination"""
        snapshot = await self.list_all()
        return count_events(snapshot, params)
