"""
Guards de apresentação de overlays.

Decide se uma superfície pode ser apresentada ou dispensada a partir
do conjunto de superfícies ativas:

- apresentar: ao menos uma superfície ativa está em `presenters` E
  nenhuma superfície ativa está em `blockers`;
- dispensar: a superfície alvo está ativa (dispensar algo ausente é
  no-op, não erro).

As checagens são funções puras de um snapshot e devem ser reavaliadas
a cada chamada. `GuardedPresentationPolicy.present/dismiss` são
transformações de estado: quando aplicadas via `StateStore.update`,
guard e mutação acontecem no mesmo passo serializado.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import TypeVar

from effects.surfaces.stack import SurfaceStack, SurfaceState

logger = logging.getLogger(__name__)

StateT = TypeVar("StateT", bound=SurfaceState)

SuppressedCallback = Callable[[str, str], None]


class GuardResult:
    """
    Resultado da avaliação de um guard.

    Attributes:
        allowed: Se a apresentação/dispensa é permitida
        reason: Motivo da supressão (se allowed=False)
    """

    __slots__ = ("allowed", "reason")

    def __init__(self, allowed: bool, reason: str | None = None) -> None:
        self.allowed = allowed
        self.reason = reason

    @classmethod
    def allow(cls) -> GuardResult:
        """Cria resultado permitindo a operação."""
        return cls(allowed=True)

    @classmethod
    def deny(cls, reason: str) -> GuardResult:
        """Cria resultado suprimindo a operação."""
        return cls(allowed=False, reason=reason)

    def __bool__(self) -> bool:
        return self.allowed

    def __repr__(self) -> str:
        return f"GuardResult(allowed={self.allowed!r}, reason={self.reason!r})"


def evaluate_presentation(
    target: str,
    presenters: Iterable[str],
    blockers: Iterable[str],
    active: Iterable[str],
) -> GuardResult:
    """
    Avalia se `target` pode ser apresentada.

    Args:
        target: Superfície a apresentar (usada apenas no motivo)
        presenters: Superfícies que permitem a apresentação
        blockers: Superfícies que impedem a apresentação
        active: Superfícies ativas no momento

    Returns:
        GuardResult com o motivo da supressão, se houver
    """
    active_set = set(active)

    if active_set.isdisjoint(presenters):
        return GuardResult.deny(f"{target}: nenhum presenter ativo")

    blocking = active_set.intersection(blockers)
    if blocking:
        return GuardResult.deny(
            f"{target}: bloqueado por {', '.join(sorted(blocking))}"
        )

    return GuardResult.allow()


def evaluate_dismissal(target: str, active: Iterable[str]) -> GuardResult:
    """Avalia se `target` pode ser dispensada (precisa estar ativa)."""
    if target not in set(active):
        return GuardResult.deny(f"{target}: não está ativa")
    return GuardResult.allow()


def should_present(
    target: str,
    presenters: Iterable[str],
    blockers: Iterable[str],
    active: Iterable[str],
) -> bool:
    """True sse `active ∩ presenters ≠ ∅` e `active ∩ blockers = ∅`."""
    return evaluate_presentation(target, presenters, blockers, active).allowed


def should_dismiss(target: str, active: Iterable[str]) -> bool:
    """True sse `target ∈ active`."""
    return evaluate_dismissal(target, active).allowed


class GuardedPresentationPolicy:
    """
    Política de apresentação de um overlay com conjuntos fixos.

    Attributes:
        target: Superfície controlada pela política
        presenters: Superfícies que permitem a apresentação
        blockers: Superfícies que impedem a apresentação
    """

    __slots__ = ("blockers", "presenters", "target")

    def __init__(
        self,
        target: str,
        presenters: Iterable[str],
        blockers: Iterable[str],
    ) -> None:
        self.target = target
        self.presenters = frozenset(presenters)
        self.blockers = frozenset(blockers)

    def evaluate_presentation(self, active: Iterable[str]) -> GuardResult:
        return evaluate_presentation(self.target, self.presenters, self.blockers, active)

    def evaluate_dismissal(self, active: Iterable[str]) -> GuardResult:
        return evaluate_dismissal(self.target, active)

    def should_present(self, active: Iterable[str]) -> bool:
        return self.evaluate_presentation(active).allowed

    def should_dismiss(self, active: Iterable[str]) -> bool:
        return self.evaluate_dismissal(active).allowed

    def present(
        self,
        state: StateT,
        on_suppressed: SuppressedCallback | None = None,
    ) -> StateT:
        """
        Transformação de estado: apresenta o alvo se o guard permitir.

        Args:
            state: Snapshot entregue pelo update atômico do store
            on_suppressed: Callback (target, reason) quando o guard nega

        Returns:
            Novo estado, ou o mesmo estado se a apresentação foi suprimida
        """
        result = self.evaluate_presentation(state.active_surfaces)
        if not result.allowed:
            self._suppressed("present", result, on_suppressed)
            return state
        stack = SurfaceStack.from_state(state)
        return state.with_active_surfaces(stack.pushed(self.target))

    def dismiss(
        self,
        state: StateT,
        on_suppressed: SuppressedCallback | None = None,
    ) -> StateT:
        """Transformação de estado: remove o alvo se estiver ativo."""
        result = self.evaluate_dismissal(state.active_surfaces)
        if not result.allowed:
            self._suppressed("dismiss", result, on_suppressed)
            return state
        stack = SurfaceStack.from_state(state)
        return state.with_active_surfaces(stack.removed(self.target))

    def _suppressed(
        self,
        operation: str,
        result: GuardResult,
        on_suppressed: SuppressedCallback | None,
    ) -> None:
        reason = result.reason or "guard_denied"
        # Supressão é resultado esperado e frequente: nunca é erro
        logger.debug(
            "guard_suppressed",
            extra={"target": self.target, "operation": operation, "reason": reason},
        )
        if on_suppressed is not None:
            on_suppressed(self.target, reason)

    def __repr__(self) -> str:
        return (
            f"GuardedPresentationPolicy(target={self.target!r}, "
            f"presenters={sorted(self.presenters)!r}, blockers={sorted(self.blockers)!r})"
        )
