"""
@file_name: main.py
@author: NetMind.AI
@date: 2025-11-28
@description: FastAPI application entry point

Provides the admin REST API for events, the public listing, and the streamed
event summary. Routers are mounted under /api and /api/v1.

Usage:
    uvicorn backend.main:app --reload --port 3000
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from event_hub import __version__
from event_hub.events import EventService
from event_hub.repository import EventRepository
from event_hub.services import NotificationService
from event_hub.settings import Settings, settings as default_settings
from event_hub.summary import (
    SummaryCache,
    SummaryGenerator,
    SummaryStreamer,
    build_summary_generator,
)
from event_hub.summary.streamer import SleepFunc
from event_hub.utils import BackgroundTasks, setup_logging, utc_now

from backend.dependencies import AppContainer
from backend.errors import register_exception_handlers
from backend.middleware import register_request_middleware

API_PREFIXES = ("/api", "/api/v1")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager

    - Startup: log configuration
    - Shutdown: let pending notification tasks finish
    """
    container: AppContainer = app.state.container
    logger.info(
        f"Starting Event Hub API (summary_strategy={container.settings.summary_strategy}, "
        f"chunk_delay_ms={container.settings.summary_chunk_delay_ms})"
    )

    yield

    logger.info("Shutting down Event Hub API...")
    await container.background_tasks.drain()


def create_app(
    app_settings: Optional[Settings] = None,
    *,
    repository: Optional[EventRepository] = None,
    summary_generator: Optional[SummaryGenerator] = None,
    summary_sleep: Optional[SleepFunc] = None,
    notification_service: Optional[NotificationService] = None,
) -> FastAPI:
    """
    Build a fully wired application

    Every call creates its own repository and cache, so separate apps (e.g. one
    per test) never share state.

    Args:
        app_settings: Settings override (defaults to the environment-loaded settings)
        repository: EventRepository override
        summary_generator: Summary strategy override
        summary_sleep: Replacement for asyncio.sleep between summary chunks
        notification_service: Notification backend override
    """
    if app_settings is None:
        app_settings = default_settings
    setup_logging(app_settings.log_level, app_settings.log_json)

    if repository is None:
        repository = EventRepository()
    summary_cache = SummaryCache()
    background_tasks = BackgroundTasks()
    streamer_kwargs = {"sleep": summary_sleep} if summary_sleep is not None else {}
    summary_streamer = SummaryStreamer(
        chunk_size=app_settings.summary_chunk_size,
        delay_ms=app_settings.summary_chunk_delay_ms,
        **streamer_kwargs,
    )
    event_service = EventService(
        repository=repository,
        summary_cache=summary_cache,
        summary_generator=(
            summary_generator if summary_generator is not None else build_summary_generator(app_settings)
        ),
        summary_streamer=summary_streamer,
        notification_service=notification_service,
        background_tasks=background_tasks,
    )

    app = FastAPI(
        title="Event Hub API",
        description="Admin and public REST APIs for events, with streamed summaries",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.container = AppContainer(
        settings=app_settings,
        repository=repository,
        summary_cache=summary_cache,
        event_service=event_service,
        background_tasks=background_tasks,
        started_at=utc_now(),
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Summary-Cache", "X-Request-Id"],
    )
    register_request_middleware(app)
    register_exception_handlers(app)

    # Import and include routers
    from backend.routes.events import router as events_router
    from backend.routes.public_events import router as public_events_router
    from backend.routes.health import router as health_router

    for index, prefix in enumerate(API_PREFIXES):
        # Only the first prefix is documented; the others are aliases
        in_schema = index == 0
        app.include_router(events_router, prefix=prefix, tags=["Events"], include_in_schema=in_schema)
        app.include_router(public_events_router, prefix=prefix, tags=["Public"], include_in_schema=in_schema)
        app.include_router(health_router, prefix=prefix, tags=["Health"], include_in_schema=in_schema)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=default_settings.host, port=default_settings.port)
