"""
Descritores de efeito.

Um efeito é um objeto-valor imutável que descreve uma unidade de
comportamento reativo. É criado por evento, executado no máximo uma
vez por despacho e descartado em seguida; não possui recursos próprios.

Subclasses concretas são dataclasses `frozen=True, slots=True`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, ClassVar

if TYPE_CHECKING:
    from effects.manager.context import EffectContext


class Effect(ABC):
    """
    Unidade de trabalho reativo despachada pelo EffectCoordinator.

    Attributes:
        name: Identificador estável do efeito (logs, métricas, histórico)
    """

    __slots__ = ()

    name: ClassVar[str] = "effect"

    @abstractmethod
    async def run(self, context: EffectContext) -> None:
        """Executa o corpo do efeito.

        Args:
            context: Contexto de execução (estado, despacho, espera)

        Raises:
            EffectFailure: Se o efeito não puder cumprir seu contrato
        """


class StateUpdater(Effect):
    """
    Efeito restrito que apenas transforma o estado.

    O coordinator aplica `update_state` através do update atômico do
    store; se o novo estado for igual ao anterior (igualdade campo a
    campo) nenhuma notificação é emitida.
    """

    __slots__ = ()

    name: ClassVar[str] = "state-update"

    @abstractmethod
    def update_state(self, state: Any) -> Any:
        """Retorna o novo estado a partir do atual (função pura)."""

    async def run(self, context: EffectContext) -> None:
        context.update_state(self.update_state)
