"""
Resultado da execução de um efeito.

Registro imutável usado no histórico do coordinator e nos logs.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any


@dataclass(frozen=True, slots=True)
class EffectOutcome:
    """
    Resultado de um efeito despachado.

    Attributes:
        effect_name: Nome do efeito executado
        success: Se o efeito terminou sem falha
        error_reason: Motivo da falha (se success=False)
        state_changed: Para StateUpdater, se o estado mudou (None nos demais)
        elapsed_ms: Duração da execução em milissegundos
        finished_at: Momento de término (UTC)
    """

    effect_name: str
    success: bool
    error_reason: str | None = None
    state_changed: bool | None = None
    elapsed_ms: float = 0.0
    finished_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        """Valida consistência do resultado."""
        if self.success and self.error_reason is not None:
            raise ValueError("Resultado bem-sucedido não pode ter error_reason")
        if not self.success and self.error_reason is None:
            raise ValueError("Resultado com falha deve incluir error_reason")

    @classmethod
    def succeeded(
        cls,
        effect_name: str,
        elapsed_ms: float = 0.0,
        state_changed: bool | None = None,
    ) -> EffectOutcome:
        """Cria resultado de sucesso."""
        return cls(
            effect_name=effect_name,
            success=True,
            state_changed=state_changed,
            elapsed_ms=elapsed_ms,
        )

    @classmethod
    def failed(
        cls,
        effect_name: str,
        reason: str,
        elapsed_ms: float = 0.0,
    ) -> EffectOutcome:
        """Cria resultado de falha."""
        return cls(
            effect_name=effect_name,
            success=False,
            error_reason=reason,
            elapsed_ms=elapsed_ms,
        )

    def to_log_dict(self) -> dict[str, Any]:
        """Retorna representação segura para logs."""
        return {
            "effect": self.effect_name,
            "success": self.success,
            "error_reason": self.error_reason,
            "state_changed": self.state_changed,
            "elapsed_ms": round(self.elapsed_ms, 2),
            "finished_at": self.finished_at.isoformat(),
        }
