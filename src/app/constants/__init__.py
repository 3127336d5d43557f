"""Constantes da aplicação (superfícies, abas, IDs de notificação)."""

from app.constants.notifications import (
    STATUS_CHANGE_NOTIFICATION_IDS,
    UPDATE_REQUIRED_NOTIFICATION_IDS,
)
from app.constants.surfaces import (
    SENSITIVE_COVER_BLOCKERS,
    SENSITIVE_COVER_PRESENTERS,
    SurfaceId,
    Tab,
)

__all__ = [
    "SENSITIVE_COVER_BLOCKERS",
    "SENSITIVE_COVER_PRESENTERS",
    "STATUS_CHANGE_NOTIFICATION_IDS",
    "UPDATE_REQUIRED_NOTIFICATION_IDS",
    "SurfaceId",
    "Tab",
]
