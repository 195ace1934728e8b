"""
@file_name: event_service.py
@author: NetMind.AI
@date: 2025-12-22
@description: Event service protocol layer

This is the public interface for EventService; lifecycle rules and the public
projection live in the _event_impl module, storage in EventRepository, and the
summary pipeline in event_hub.summary.

Features:
1. create_event() - Create an Event (default DRAFT) and notify
2. update_event() - Validate the transition, patch, invalidate the summary cache, notify
3. list_events() / list_public_events() - Filtered, paginated listings
4. get_event_by_id() / get_public_event_by_id() - Private and public lookups
5. open_summary_stream() - Cached or freshly generated, chunked summary
"""

from __future__ import annotations

import math
from typing import Any, AsyncIterator, Dict, Optional
from uuid import uuid4

from loguru import logger

from event_hub.repository import EventRepository, effective_limit
from event_hub.schema import (
    CreateEventRequest,
    Event,
    EventListResponse,
    EventQueryParams,
    EventStatus,
    Pagination,
    PublicEvent,
    PublicEventListResponse,
    UpdateEventRequest,
)
from event_hub.services import LoggingNotificationService, NotificationService
from event_hub.summary import (
    CacheStatus,
    SummaryCache,
    SummaryGenerator,
    SummaryStream,
    SummaryStreamer,
    TemplateSummaryGenerator,
    single_frame,
)
from event_hub.utils import BackgroundTasks, EventNotFoundError, utc_now

from ._event_impl import (
    PUBLIC_STATUSES,
    is_publicly_visible,
    to_public_event,
    validate_status_transition,
)

SUMMARY_ERROR_MESSAGE = "Error generating summary. Please try again later."


class EventService:
    """
    Event Service - Orchestrates storage, lifecycle rules, notifications and summaries

    Usage:
        >>> service = EventService(EventRepository(), SummaryCache())
        >>> event = await service.create_event(CreateEventRequest(...))
        >>> event = await service.update_event(event.id, UpdateEventRequest(status="PUBLISHED"))
        >>> stream = await service.open_summary_stream(event.id)
        >>> async for frame in stream.frames: ...
    """

    def __init__(
        self,
        repository: EventRepository,
        summary_cache: SummaryCache,
        summary_generator: Optional[SummaryGenerator] = None,
        summary_streamer: Optional[SummaryStreamer] = None,
        notification_service: Optional[NotificationService] = None,
        background_tasks: Optional[BackgroundTasks] = None,
    ):
        self._repository = repository
        self._cache = summary_cache
        self._generator = summary_generator if summary_generator is not None else TemplateSummaryGenerator()
        self._streamer = summary_streamer if summary_streamer is not None else SummaryStreamer()
        self._notifier = (
            notification_service if notification_service is not None else LoggingNotificationService()
        )
        self.background_tasks = background_tasks if background_tasks is not None else BackgroundTasks()

        logger.debug(
            f"EventService initialized (generator={type(self._generator).__name__}, "
            f"chunk_size={self._streamer.chunk_size}, delay_ms={self._streamer.delay_ms})"
        )

    # =========================================================================
    # Create / Update
    # =========================================================================

    async def create_event(self, request: CreateEventRequest) -> Event:
        """
        Create an Event

        Creation does not go through the lifecycle table; any supplied status is
        accepted as the initial state.
        """
        event = Event(
            id=str(uuid4()),
            title=request.title,
            start_at=request.start_at,
            end_at=request.end_at,
            location=request.location,
            status=request.status or EventStatus.DRAFT,
            internal_notes=request.internal_notes,
            created_by=request.created_by,
            updated_at=utc_now(),
        )

        created = await self._repository.create(event)
        logger.info(f"Event created: {created.id} (status={created.status.value})")

        self.background_tasks.spawn(
            self._notifier.notify_event_created(created.title),
            f"notify-created-{created.id}",
        )
        return created

    async def update_event(self, event_id: str, request: UpdateEventRequest) -> Event:
        """
        Apply a partial update

        Args:
            event_id: Event ID
            request: Patch (status and/or internalNotes)

        Returns:
            The updated Event

        Raises:
            EventNotFoundError: Unknown id
            InvalidTransitionError: Status change forbidden by the lifecycle table
        """
        event = await self._repository.find_by_id(event_id)
        if event is None:
            raise EventNotFoundError(event_id=event_id)

        previous_status = event.status
        status_changes = request.has_status and request.status != previous_status
        if status_changes:
            # Fail before any write
            validate_status_transition(previous_status, request.status)

        updates: Dict[str, Any] = {"updated_at": utc_now()}
        if request.has_status:
            updates["status"] = request.status
        if request.has_internal_notes:
            updates["internal_notes"] = request.internal_notes

        updated = await self._repository.update(event_id, updates)
        if updated is None:
            raise EventNotFoundError(event_id=event_id)

        # Unconditional: notes/status-only edits purge the cache too
        self._cache.invalidate(event_id)

        logger.info(
            f"Event updated: {event_id} (fields={sorted(k for k in updates if k != 'updated_at')}, "
            f"status={previous_status.value}->{updated.status.value})"
        )

        if status_changes:
            self._notify_transition(previous_status, updated)

        return updated

    def _notify_transition(self, previous_status: EventStatus, event: Event) -> None:
        if previous_status == EventStatus.DRAFT and event.status == EventStatus.PUBLISHED:
            self.background_tasks.spawn(
                self._notifier.notify_event_published(event.title),
                f"notify-published-{event.id}",
            )
        elif event.status == EventStatus.CANCELLED:
            self.background_tasks.spawn(
                self._notifier.notify_event_cancelled(event.title),
                f"notify-cancelled-{event.id}",
            )

    # =========================================================================
    # Read
    # =========================================================================

    async def get_event_by_id(self, event_id: str) -> Optional[Event]:
        return await self._repository.find_by_id(event_id)

    async def get_public_event_by_id(self, event_id: str) -> Optional[PublicEvent]:
        """
        Public lookup

        DRAFT and missing events both return None; callers cannot tell them apart.
        """
        event = await self._repository.find_by_id(event_id)
        if event is None or not is_publicly_visible(event):
            return None
        return to_public_event(event)

    async def list_events(self, params: EventQueryParams) -> EventListResponse:
        """Private listing (all statuses unless filtered)"""
        events = await self._repository.find_all(params)
        total = await self._repository.count(params)
        return EventListResponse(events=events, pagination=self._pagination(params, total))

    async def list_public_events(self, params: EventQueryParams) -> PublicEventListResponse:
        """
        Public listing

        Any client-supplied status filter is replaced by {PUBLISHED, CANCELLED}.
        """
        public_params = params.model_copy(update={"status": sorted(PUBLIC_STATUSES, key=lambda s: s.value)})
        events = await self._repository.find_all(public_params)
        total = await self._repository.count(public_params)
        return PublicEventListResponse(
            events=[to_public_event(event) for event in events],
            pagination=self._pagination(public_params, total),
        )

    @staticmethod
    def _pagination(params: EventQueryParams, total: int) -> Pagination:
        limit = effective_limit(params.limit)
        return Pagination(
            page=params.page,
            limit=limit,
            total=total,
            total_pages=math.ceil(total / limit),
        )

    # =========================================================================
    # Summary
    # =========================================================================

    async def open_summary_stream(self, event_id: str) -> SummaryStream:
        """
        Resolve the public event and decide HIT or MISS

        Resolution happens eagerly so a 404 can be returned before any frame is
        sent; generation on MISS is deferred until the frames are consumed.

        Raises:
            EventNotFoundError: Missing or not publicly visible
        """
        public_event = await self.get_public_event_by_id(event_id)
        if public_event is None:
            raise EventNotFoundError("Event not found or not published", event_id=event_id)

        content_hash = self._cache.hash(public_event)
        cached = self._cache.get(event_id, content_hash)
        if cached:
            logger.info(f"Summary cache HIT: {event_id}")
            return SummaryStream(event_id, CacheStatus.HIT, single_frame(cached))

        logger.info(f"Summary cache MISS: {event_id}")
        return SummaryStream(
            event_id,
            CacheStatus.MISS,
            self._generate_frames(public_event, content_hash),
        )

    async def _generate_frames(self, event: PublicEvent, content_hash: str) -> AsyncIterator[str]:
        """
        Generate, chunk and emit; cache the full text only after the last chunk

        If the consumer stops early (disconnect -> cancellation or aclose), the
        code after the loop never runs and nothing is cached.
        """
        try:
            summary = await self._generator.generate(event)
        except Exception as e:
            logger.error(f"Summary generation failed for {event.id}: {type(e).__name__}: {e}")
            yield SUMMARY_ERROR_MESSAGE
            return

        if not summary or not summary.strip():
            logger.error(f"Summary generation returned empty text for {event.id}")
            yield SUMMARY_ERROR_MESSAGE
            return

        emitted = []
        async for chunk in self._streamer.stream(summary):
            emitted.append(chunk)
            yield chunk

        self._cache.set(event.id, content_hash, "".join(emitted))
        logger.debug(f"Summary cached: {event.id} ({len(emitted)} chunks)")
