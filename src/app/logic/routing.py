"""Regras de roteamento de notificações (configuração como dados)."""

from __future__ import annotations

from app.constants.notifications import (
    STATUS_CHANGE_NOTIFICATION_IDS,
    UPDATE_REQUIRED_NOTIFICATION_IDS,
)
from app.logic.shared import HandleStatusChangeNotification, OpenAppStorePage
from effects.routing import NotificationRouter, RoutingRule

UPDATE_REQUIRED_RULE = "update_required"
STATUS_CHANGE_RULE = "status_change"


def build_default_routing_rules() -> tuple[RoutingRule, ...]:
    """Regras fixas em build: atualização obrigatória e mudança de status."""
    return (
        RoutingRule(
            name=UPDATE_REQUIRED_RULE,
            notification_ids=UPDATE_REQUIRED_NOTIFICATION_IDS,
            build_effect=lambda _notification_id: OpenAppStorePage(),
        ),
        RoutingRule(
            name=STATUS_CHANGE_RULE,
            notification_ids=STATUS_CHANGE_NOTIFICATION_IDS,
            build_effect=lambda _notification_id: HandleStatusChangeNotification(),
        ),
    )


def create_notification_router(
    rules: tuple[RoutingRule, ...] | None = None,
) -> NotificationRouter:
    """Cria o router com as regras informadas (padrão quando None)."""
    return NotificationRouter(rules if rules is not None else build_default_routing_rules())
