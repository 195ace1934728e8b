"""
@file_name: health.py
@author: NetMind.AI
@date: 2025-11-28
@description: Health check route
"""

from fastapi import APIRouter, Depends

from event_hub.schema import HealthResponse
from event_hub.utils import format_for_api, seconds_since, utc_now

from backend.dependencies import AppContainer, get_container


router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(container: AppContainer = Depends(get_container)):
    """Liveness probe with uptime in seconds"""
    return HealthResponse(
        status="healthy",
        timestamp=format_for_api(utc_now()),
        uptime=seconds_since(container.started_at),
    )
