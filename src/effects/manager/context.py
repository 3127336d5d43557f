"""
Contexto de execução entregue a cada efeito.

O contexto não guarda snapshot: `state` e `surfaces` são relidos do
store a cada acesso, então um efeito que retoma após uma suspensão
sempre observa o estado corrente.
"""

from __future__ import annotations

from contextvars import ContextVar
from typing import TYPE_CHECKING, Any

from effects.surfaces.stack import SurfaceStack

if TYPE_CHECKING:
    import asyncio
    from collections.abc import Callable

    from effects.manager.coordinator import EffectCoordinator
    from effects.types.effect import Effect
    from effects.types.outcome import EffectOutcome
    from effects.types.store import Predicate

# Nome do efeito em execução (injetado nos logs)
_current_effect: ContextVar[str] = ContextVar("current_effect", default="")


def get_current_effect_name() -> str:
    """Retorna o nome do efeito em execução no contexto atual ("" fora de efeitos)."""
    return _current_effect.get()


class EffectContext:
    """Fachada do coordinator exposta ao corpo dos efeitos."""

    __slots__ = ("_coordinator",)

    def __init__(self, coordinator: EffectCoordinator) -> None:
        self._coordinator = coordinator

    @property
    def state(self) -> Any:
        """Estado corrente (nunca cachear através de `await`)."""
        return self._coordinator.state

    @property
    def surfaces(self) -> SurfaceStack:
        """Superfícies ativas derivadas do estado corrente."""
        return SurfaceStack.from_state(self._coordinator.state)

    @property
    def dependencies(self) -> Any:
        """Colaboradores externos (plataforma, router, bundle)."""
        return self._coordinator.dependencies

    def dispatch(self, effect: Effect) -> asyncio.Task[EffectOutcome]:
        """Despacha efeito aninhado sem aguardar (fire-and-forget)."""
        return self._coordinator.dispatch(effect, nested=True)

    async def await_dispatch(self, effect: Effect) -> EffectOutcome:
        """Despacha efeito aninhado e aguarda sua conclusão.

        Raises:
            EffectFailure: Falha do efeito aninhado (propaga ao chamador)
        """
        return await self._coordinator.dispatch_and_await(effect, nested=True)

    async def wait_for(
        self,
        predicate: Predicate[Any],
        timeout: float | None = None,
    ) -> None:
        """Suspende até `predicate(estado)` ser verdadeiro.

        Args:
            predicate: Função pura do estado
            timeout: Prazo em segundos (None usa o padrão do coordinator)
        """
        await self._coordinator.wait_for(predicate, timeout=timeout)

    def update_state(self, transform: Callable[[Any], Any]) -> bool:
        """Aplica transformação atômica no estado; retorna se mudou."""
        return self._coordinator.store.update(transform)
