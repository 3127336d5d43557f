"""Casos de uso de notificações."""

from app.use_cases.notifications.handle_notification_response import (
    NotificationRoutingSummary,
    handle_notification_response,
)

__all__ = [
    "NotificationRoutingSummary",
    "handle_notification_response",
]
