"""
@file_name: events.py
@author: NetMind.AI
@date: 2025-11-28
@description: Admin REST API routes for events (bearer token required)

Provides endpoints for:
- POST /events - Create an event
- PATCH /events/{event_id} - Update status and/or internalNotes
- GET /events - Filtered, paginated listing of all events
"""

from fastapi import APIRouter, Depends
from loguru import logger

from event_hub.events import EventService
from event_hub.schema import (
    CreateEventRequest,
    Event,
    EventListResponse,
    EventQueryParams,
    ErrorResponse,
    UpdateEventRequest,
)

from backend.dependencies import get_event_query, get_event_service, require_admin_token


router = APIRouter(
    dependencies=[Depends(require_admin_token)],
    responses={401: {"model": ErrorResponse}, 400: {"model": ErrorResponse}},
)


@router.post(
    "/events",
    status_code=201,
    response_model=Event,
    response_model_exclude_none=True,
)
async def create_event(
    request: CreateEventRequest,
    event_service: EventService = Depends(get_event_service),
):
    """Create an event (status defaults to DRAFT)"""
    logger.info(f"Creating event: {request.title!r}")
    return await event_service.create_event(request)


@router.patch(
    "/events/{event_id}",
    response_model=Event,
    response_model_exclude_none=True,
    responses={404: {"model": ErrorResponse}},
)
async def update_event(
    event_id: str,
    request: UpdateEventRequest,
    event_service: EventService = Depends(get_event_service),
):
    """
    Partially update an event

    Status changes follow the lifecycle table; the cached summary is purged on
    every successful update.
    """
    logger.info(f"Updating event: {event_id}")
    return await event_service.update_event(event_id, request)


@router.get(
    "/events",
    response_model=EventListResponse,
    response_model_exclude_none=True,
)
async def list_events(
    params: EventQueryParams = Depends(get_event_query),
    event_service: EventService = Depends(get_event_service),
):
    """List events (all statuses unless filtered)"""
    return await event_service.list_events(params)
