"""Settings do EffectCoordinator e do PredicateWaiter.

Espera sem prazo é o comportamento padrão (EFFECT_WAIT_TIMEOUT_SECONDS
vazio ou "0"); um valor positivo faz esperas falharem com WaitTimeoutError.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from effects.manager.coordinator import DEFAULT_HISTORY_SIZE

DEFAULT_SHUTDOWN_TIMEOUT_SECONDS = 5.0


@dataclass(frozen=True)
class CoordinatorSettings:
    """Configurações de coordenação de efeitos.

    Attributes:
        wait_timeout_seconds: Prazo padrão de espera por predicado (None = sem prazo)
        history_size: Quantidade de resultados mantidos no histórico
        shutdown_timeout_seconds: Tempo para drenar efeitos no shutdown
    """

    wait_timeout_seconds: float | None = None
    history_size: int = DEFAULT_HISTORY_SIZE
    shutdown_timeout_seconds: float = DEFAULT_SHUTDOWN_TIMEOUT_SECONDS

    def validate(self) -> list[str]:
        """Valida configurações de coordenação.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []

        if self.wait_timeout_seconds is not None and self.wait_timeout_seconds <= 0:
            errors.append("EFFECT_WAIT_TIMEOUT_SECONDS deve ser > 0 quando definido")

        if self.history_size < 1:
            errors.append("EFFECT_HISTORY_SIZE deve ser >= 1")

        if self.shutdown_timeout_seconds < 0:
            errors.append("EFFECT_SHUTDOWN_TIMEOUT_SECONDS deve ser >= 0")

        return errors


def _parse_optional_seconds(raw: str) -> float | None:
    """Converte string em segundos; vazio ou zero significa sem prazo."""
    value = raw.strip()
    if not value:
        return None
    seconds = float(value)
    return seconds if seconds != 0 else None


def _load_coordinator_from_env() -> CoordinatorSettings:
    """Carrega CoordinatorSettings de variáveis de ambiente."""
    return CoordinatorSettings(
        wait_timeout_seconds=_parse_optional_seconds(
            os.getenv("EFFECT_WAIT_TIMEOUT_SECONDS", "")
        ),
        history_size=int(os.getenv("EFFECT_HISTORY_SIZE", str(DEFAULT_HISTORY_SIZE))),
        shutdown_timeout_seconds=float(
            os.getenv(
                "EFFECT_SHUTDOWN_TIMEOUT_SECONDS",
                str(DEFAULT_SHUTDOWN_TIMEOUT_SECONDS),
            )
        ),
    )


@lru_cache(maxsize=1)
def get_coordinator_settings() -> CoordinatorSettings:
    """Retorna instância cacheada de CoordinatorSettings."""
    return _load_coordinator_from_env()
