"""
@file_name: notification_service.py
@author: NetMind.AI
@date: 2025-12-22
@description: Event lifecycle notifications

Notifications are best-effort: EventService schedules them as background tasks
and never waits for them. The default implementation only writes a log line;
another transport can be plugged in by implementing NotificationService.
"""

import asyncio
from typing import Protocol

from loguru import logger


class NotificationService(Protocol):
    """Receives lifecycle notifications"""

    async def notify_event_created(self, title: str) -> None:
        ...

    async def notify_event_published(self, title: str) -> None:
        ...

    async def notify_event_cancelled(self, title: str) -> None:
        ...


class LoggingNotificationService:
    """Log-only notifier"""

    async def notify_event_created(self, title: str) -> None:
        await asyncio.sleep(0)
        logger.info(f"[NOTIFICATION] New event created: {title}")

    async def notify_event_published(self, title: str) -> None:
        await asyncio.sleep(0)
        logger.info(f"[NOTIFICATION] Event published: {title}")

    async def notify_event_cancelled(self, title: str) -> None:
        await asyncio.sleep(0)
        logger.info(f"[NOTIFICATION] Event cancelled: {title}")
