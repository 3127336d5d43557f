"""Configuração centralizada de logging.

Logging estruturado JSON para o núcleo de efeitos:
- Campos obrigatórios (correlation_id, effect, service, level, logger, message)
- Níveis configuráveis por ambiente
- Handler único no root logger (chamadas repetidas não duplicam saída)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, TextIO

from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "effect_core"


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
    effect_name_getter: Callable[[], str] | None = None,
    stream: TextIO | None = None,
) -> None:
    """Configura logging JSON estruturado para o serviço.

    Deve ser chamada uma vez, no composition root.

    Args:
        level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Retorna o correlation_id do contexto atual.
        effect_name_getter: Retorna o nome do efeito em execução.
        stream: Destino do handler (stderr quando None).

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler(stream)
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(
        CorrelationIdFilter(service_name, correlation_id_getter, effect_name_getter)
    )

    root = logging.getLogger()
    root.setLevel(level_upper)
    root.handlers = [handler]


def get_logger(name: str) -> logging.Logger:
    """Retorna logger para o módulo (o filter injeta service/correlation_id)."""
    return logging.getLogger(name)


def log_fallback(
    logger: logging.Logger,
    component: str,
    reason: str | None = None,
    elapsed_ms: float | None = None,
) -> None:
    """Log observável de reação best-effort abandonada.

    Usado no topo de uma cadeia de efeitos, onde a falha vira
    "nada acontece" para o usuário em vez de um crash.

    Args:
        logger: Logger instance.
        component: Nome do componente (ex: "notification_response").
        reason: Razão do fallback (ex: "wait_timeout").
        elapsed_ms: Tempo decorrido em ms (quando aplicável).
    """
    extra: dict[str, object] = {
        "fallback_used": True,
        "component": component,
    }
    if reason:
        extra["reason"] = reason
    if elapsed_ms is not None:
        extra["elapsed_ms"] = elapsed_ms

    logger.info(
        "Fallback applied for %s",
        component,
        extra=extra,
    )
