"""
@file_name: __init__.py
@author: NetMind.AI
@date: 2025-11-28
@description: API routes package
"""

from backend.routes.events import router as events_router
from backend.routes.public_events import router as public_events_router
from backend.routes.health import router as health_router

__all__ = [
    "events_router",
    "public_events_router",
    "health_router",
]
