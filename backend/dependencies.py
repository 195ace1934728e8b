"""
@file_name: dependencies.py
@author: NetMind.AI
@date: 2025-11-28
@description: FastAPI dependencies

- AppContainer: components built once by create_app() and kept on app.state
- get_event_service: resolve the EventService for a request
- require_admin_token: bearer-token check for admin routes
- get_event_query: parse listing query strings into EventQueryParams
"""

import hmac
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from fastapi import Depends, Header, Query, Request
from pydantic import ValidationError

from event_hub.events import EventService
from event_hub.repository import EventRepository
from event_hub.schema import EventQueryParams
from event_hub.settings import Settings
from event_hub.summary import SummaryCache
from event_hub.utils import BackgroundTasks, EventValidationError, UnauthorizedError

from backend.errors import validation_details


@dataclass
class AppContainer:
    """Composition root: one instance per application"""
    settings: Settings
    repository: EventRepository
    summary_cache: SummaryCache
    event_service: EventService
    background_tasks: BackgroundTasks
    started_at: datetime


def get_container(request: Request) -> AppContainer:
    return request.app.state.container


def get_event_service(container: AppContainer = Depends(get_container)) -> EventService:
    return container.event_service


def require_admin_token(
    authorization: Optional[str] = Header(default=None),
    container: AppContainer = Depends(get_container),
) -> None:
    """
    Compare the bearer token with settings.admin_token

    Raises:
        UnauthorizedError: Header missing or token mismatch
    """
    if not authorization:
        raise UnauthorizedError("Missing authorization header")

    token = authorization.replace("Bearer ", "", 1)
    if not hmac.compare_digest(token.encode("utf-8"), container.settings.admin_token.encode("utf-8")):
        raise UnauthorizedError("Invalid authorization token")


def get_event_query(
    date_from: Optional[str] = Query(None, alias="dateFrom", description="YYYY-MM-DD, inclusive"),
    date_to: Optional[str] = Query(None, alias="dateTo", description="YYYY-MM-DD, inclusive"),
    locations: Optional[str] = Query(None, description="Comma-separated location substrings"),
    status: Optional[str] = Query(None, description="Comma-separated statuses (ignored on public routes)"),
    page: Optional[str] = Query(None, description="Page number, starting at 1"),
    limit: Optional[str] = Query(None, description="Page size, clamped to 100"),
) -> EventQueryParams:
    """
    Build EventQueryParams from raw query strings

    Raises:
        EventValidationError: Any parameter has the wrong shape (all failures reported)
    """
    raw = {
        "dateFrom": date_from,
        "dateTo": date_to,
        "locations": locations,
        "status": status,
        "page": page,
        "limit": limit,
    }
    try:
        return EventQueryParams.model_validate({k: v for k, v in raw.items() if v is not None})
    except ValidationError as e:
        raise EventValidationError(details=validation_details(e.errors()), cause=e) from e


def get_public_event_query(
    date_from: Optional[str] = Query(None, alias="dateFrom", description="YYYY-MM-DD, inclusive"),
    date_to: Optional[str] = Query(None, alias="dateTo", description="YYYY-MM-DD, inclusive"),
    locations: Optional[str] = Query(None, description="Comma-separated location substrings"),
    page: Optional[str] = Query(None, description="Page number, starting at 1"),
    limit: Optional[str] = Query(None, description="Page size, clamped to 100"),
) -> EventQueryParams:
    """Same as get_event_query without the status filter, which the public listing overrides"""
    return get_event_query(
        date_from=date_from,
        date_to=date_to,
        locations=locations,
        status=None,
        page=page,
        limit=limit,
    )
