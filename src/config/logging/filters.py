"""Filters de logging para injeção de contexto.

Campos injetados:
- correlation_id: ID do evento inbound que originou a cadeia de efeitos
- effect: Nome do efeito em execução (vazio fora de efeitos)
- service: Nome do serviço
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable


def _empty() -> str:
    return ""


class CorrelationIdFilter(logging.Filter):
    """Injeta correlation_id, effect e service em cada record de log.

    Valores passados explicitamente via `extra` são preservados.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
        effect_name_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or _empty
        self._get_effect_name = effect_name_getter or _empty

    def filter(self, record: logging.LogRecord) -> bool:
        """Enriquece o record; nunca descarta."""
        existing = getattr(record, "correlation_id", None)
        record.correlation_id = existing if existing else self._get_correlation_id()
        effect = getattr(record, "effect", None)
        record.effect = effect if effect else self._get_effect_name()
        record.service = self._service_name
        return True
