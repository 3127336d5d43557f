"""Use case: usuário tocou em uma notificação entregue.

Ponto de entrada chamado pela plataforma. Classifica o ID, despacha
os efeitos casados e devolve um resumo. Falhas são reduzidas a log:
essas reações são UX complementar, nunca caminho crítico.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING

from app.logic.shared import HandleNotificationResponse
from app.observability import (
    get_correlation_id,
    record_latency,
    record_routing,
    reset_correlation_id,
    set_correlation_id,
)
from config.logging import log_fallback
from utils.errors import EffectFailure

if TYPE_CHECKING:
    from effects.manager import EffectCoordinator

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class NotificationRoutingSummary:
    """Resumo do tratamento de uma notificação.

    Attributes:
        notification_id: ID recebido
        correlation_id: ID de correlação dos efeitos disparados
        matched_rules: Nomes das regras casadas
        dispatched: Quantidade de efeitos despachados
        failed: Se o despacho falhou (reduzido a log)
    """

    notification_id: str
    correlation_id: str
    matched_rules: tuple[str, ...]
    dispatched: int
    failed: bool = False

    @property
    def matched(self) -> bool:
        return bool(self.matched_rules)


async def handle_notification_response(
    coordinator: EffectCoordinator,
    notification_id: str,
    correlation_id: str | None = None,
) -> NotificationRoutingSummary:
    """Trata a resposta a uma notificação.

    Os efeitos casados rodam em fire-and-forget; a função retorna assim
    que forem despachados (cadeias podem continuar suspensas).

    Args:
        coordinator: Coordinator da sessão corrente
        notification_id: ID da notificação tocada
        correlation_id: ID de correlação (gera um novo se None)

    Returns:
        NotificationRoutingSummary com regras casadas e despachos
    """
    token = set_correlation_id(correlation_id)
    started_at = time.perf_counter()
    try:
        current_correlation_id = get_correlation_id()
        router = coordinator.dependencies.router
        matched = router.match(notification_id)
        matched_names = [rule.name for rule in matched]
        record_routing(matched_names, current_correlation_id)

        failed = False
        dispatched = 0
        if matched:
            try:
                routed = router.route(notification_id)
                await coordinator.dispatch_and_await(
                    HandleNotificationResponse(notification_id, routed=routed)
                )
                dispatched = len(routed)
            except EffectFailure as exc:
                failed = True
                log_fallback(
                    logger,
                    "notification_response",
                    reason=exc.reason,
                    elapsed_ms=(time.perf_counter() - started_at) * 1000,
                )

        record_latency(
            "notification_response",
            "handle",
            (time.perf_counter() - started_at) * 1000,
            current_correlation_id,
        )
        return NotificationRoutingSummary(
            notification_id=notification_id,
            correlation_id=current_correlation_id,
            matched_rules=tuple(matched_names),
            dispatched=dispatched,
            failed=failed,
        )
    finally:
        reset_correlation_id(token)
