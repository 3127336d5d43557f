"""
Execução de cadeias ordenadas de efeitos.

Uma cadeia é uma sequência finita de passos (predicado opcional,
efeito). Cada passo espera seu predicado e então despacha o efeito
aguardando a conclusão; o passo seguinte só começa depois disso.
Não há retry: a primeira falha aborta os passos restantes e propaga.
"""

from __future__ import annotations

import logging
from abc import abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from effects.types.effect import Effect
from utils.errors import EffectFailure

if TYPE_CHECKING:
    from effects.manager.context import EffectContext
    from effects.types.outcome import EffectOutcome
    from effects.types.store import Predicate

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ChainStep:
    """
    Passo de uma cadeia.

    Attributes:
        effect: Efeito despachado (aguardado) no passo
        predicate: Condição esperada antes do despacho (opcional)
        timeout: Prazo da espera em segundos (None usa o padrão)
    """

    effect: Effect
    predicate: Predicate[Any] | None = None
    timeout: float | None = None


async def run_chain(
    context: EffectContext,
    steps: Sequence[ChainStep],
) -> list[EffectOutcome]:
    """
    Executa os passos estritamente em ordem.

    Args:
        context: Contexto do efeito dono da cadeia
        steps: Passos a executar

    Returns:
        Resultados dos efeitos, na ordem dos passos

    Raises:
        EffectFailure: Falha em qualquer passo (passos seguintes abortados)
    """
    outcomes: list[EffectOutcome] = []
    for index, step in enumerate(steps):
        try:
            if step.predicate is not None:
                await context.wait_for(step.predicate, timeout=step.timeout)
            outcomes.append(await context.await_dispatch(step.effect))
        except EffectFailure as exc:
            logger.info(
                "effect_chain_aborted",
                extra={
                    "step_index": index,
                    "step_effect": step.effect.name,
                    "remaining_steps": len(steps) - index - 1,
                    "reason": exc.reason,
                },
            )
            raise
    return outcomes


class ChainEffect(Effect):
    """Efeito cujo corpo é uma cadeia ordenada de passos."""

    __slots__ = ()

    @abstractmethod
    def steps(self) -> Sequence[ChainStep]:
        """Passos da cadeia, em ordem."""

    async def run(self, context: EffectContext) -> None:
        await run_chain(context, self.steps())
