"""Registro de métricas via structured logging.

As métricas são registradas como logs estruturados e agregadas
depois pelo sink de logs.

Métricas suportadas:
- Latência: tempo de execução por componente/operação
- Resultado de efeito: counter de sucesso/falha por efeito
- Guard suprimido: counter de apresentações/dispensas puladas
- Roteamento: counter de notificações por regra casada

Uso:
    from app.observability.metrics import record_effect_outcome

    coordinator = EffectCoordinator(store, on_outcome=record_effect_outcome)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from effects.types.outcome import EffectOutcome

logger = logging.getLogger(__name__)


def record_latency(
    component: str,
    operation: str,
    latency_ms: float,
    correlation_id: str | None = None,
) -> None:
    """Registra latência de operação.

    Args:
        component: Nome do componente (ex: "notification_response")
        operation: Nome da operação (ex: "route")
        latency_ms: Latência em milissegundos
        correlation_id: ID de correlação para rastreamento
    """
    logger.info(
        "metric_latency",
        extra={
            "metric_type": "latency",
            "component": component,
            "operation": operation,
            "latency_ms": round(latency_ms, 2),
            "correlation_id": correlation_id,
        },
    )


def record_effect_outcome(outcome: EffectOutcome) -> None:
    """Registra o resultado de um efeito (listener do coordinator)."""
    logger.info(
        "metric_effect_outcome",
        extra={
            "metric_type": "effect_outcome",
            "component": "effect_coordinator",
            "effect": outcome.effect_name,
            "success": outcome.success,
            "state_changed": outcome.state_changed,
            "latency_ms": round(outcome.elapsed_ms, 2),
        },
    )


def record_guard_suppressed(target: str, reason: str) -> None:
    """Registra apresentação/dispensa suprimida por guard (não é erro)."""
    logger.info(
        "metric_guard_suppressed",
        extra={
            "metric_type": "guard_suppressed",
            "component": "presentation_policy",
            "target": target,
            "reason": reason,
        },
    )


def record_routing(
    matched_rules: list[str],
    correlation_id: str | None = None,
) -> None:
    """Registra classificação de uma notificação recebida.

    Args:
        matched_rules: Nomes das regras casadas (vazio = sem match)
        correlation_id: ID de correlação para rastreamento
    """
    logger.info(
        "metric_notification_routing",
        extra={
            "metric_type": "routing",
            "component": "notification_router",
            "matched_rules": matched_rules,
            "matched": bool(matched_rules),
            "correlation_id": correlation_id,
        },
    )
