"""
@file_name: public_events.py
@author: NetMind.AI
@date: 2025-11-28
@description: Public REST API routes for events (no auth)

Provides endpoints for:
- GET /public/events - Listing restricted to PUBLISHED and CANCELLED events
- GET /public/events/{event_id}/summary - Streamed summary (Server-Sent Events)

The summary response carries X-Summary-Cache: HIT (one frame, the cached text)
or MISS (generated text, one frame per chunk).
"""

from fastapi import APIRouter, Depends
from loguru import logger
from sse_starlette.sse import EventSourceResponse

from event_hub.events import EventService
from event_hub.schema import ErrorResponse, EventQueryParams, PublicEventListResponse

from backend.dependencies import get_event_service, get_public_event_query


SUMMARY_CACHE_HEADER = "X-Summary-Cache"

router = APIRouter(prefix="/public")


@router.get("/events", response_model=PublicEventListResponse)
async def list_public_events(
    params: EventQueryParams = Depends(get_public_event_query),
    event_service: EventService = Depends(get_event_service),
):
    """List publicly visible events; private fields are never included"""
    return await event_service.list_public_events(params)


@router.get(
    "/events/{event_id}/summary",
    responses={404: {"model": ErrorResponse}},
)
async def stream_event_summary(
    event_id: str,
    event_service: EventService = Depends(get_event_service),
) -> EventSourceResponse:
    """
    Stream the event summary

    The event is resolved before the response starts, so unknown and DRAFT
    events both get a plain 404.
    """
    stream = await event_service.open_summary_stream(event_id)

    async def event_generator():
        """SSE event generator"""
        frames = 0
        async for frame in stream.frames:
            frames += 1
            yield {"data": frame}
        logger.debug(f"Summary stream finished: {event_id} ({frames} frames, {stream.cache_status.value})")

    return EventSourceResponse(
        event_generator(),
        headers={
            SUMMARY_CACHE_HEADER: stream.cache_status.value,
            "Cache-Control": "no-cache",
        },
    )
