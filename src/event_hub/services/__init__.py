"""
Services package

- notification_service: lifecycle notifications (log-only by default)
"""

from .notification_service import NotificationService, LoggingNotificationService

__all__ = [
    "NotificationService",
    "LoggingNotificationService",
]
