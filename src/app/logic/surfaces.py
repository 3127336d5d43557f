"""Efeitos de apresentação e dispensa de superfícies.

O cover de dados sensíveis é guardado por GuardedPresentationPolicy;
a checagem roda dentro do update atômico do store, então o guard e a
mutação são um único passo serializado.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from app.constants.surfaces import (
    SENSITIVE_COVER_BLOCKERS,
    SENSITIVE_COVER_PRESENTERS,
    SurfaceId,
)
from app.observability.metrics import record_guard_suppressed
from app.state.models import AppState
from effects.rules import GuardedPresentationPolicy
from effects.surfaces import SurfaceStack
from effects.types import StateUpdater

SENSITIVE_COVER_POLICY = GuardedPresentationPolicy(
    target=SurfaceId.SENSITIVE_DATA_COVER,
    presenters=SENSITIVE_COVER_PRESENTERS,
    blockers=SENSITIVE_COVER_BLOCKERS,
)


@dataclass(frozen=True, slots=True)
class Show(StateUpdater):
    """Apresenta uma superfície (no-op se já estiver ativa)."""

    name: ClassVar[str] = "show-surface"

    surface: str

    def update_state(self, state: AppState) -> AppState:
        return state.with_active_surfaces(SurfaceStack.from_state(state).pushed(self.surface))


@dataclass(frozen=True, slots=True)
class Hide(StateUpdater):
    """Remove uma superfície (no-op se estiver ausente)."""

    name: ClassVar[str] = "hide-surface"

    surface: str

    def update_state(self, state: AppState) -> AppState:
        return state.with_active_surfaces(SurfaceStack.from_state(state).removed(self.surface))


@dataclass(frozen=True, slots=True)
class SyncActiveSurfaces(StateUpdater):
    """Substitui a pilha de superfícies pelo snapshot da camada de apresentação."""

    name: ClassVar[str] = "sync-active-surfaces"

    surfaces: tuple[str, ...]

    def update_state(self, state: AppState) -> AppState:
        return state.with_active_surfaces(self.surfaces)


@dataclass(frozen=True, slots=True)
class ShowSensitiveDataCoverIfNeeded(StateUpdater):
    """Apresenta o cover de dados sensíveis.

    Só quando há uma tela hospedeira compatível (tab bar ou onboarding)
    e nenhum bloqueador ativo (o próprio cover ou o overlay de permissão).
    """

    name: ClassVar[str] = "show-sensitive-cover-if-needed"

    def update_state(self, state: AppState) -> AppState:
        return SENSITIVE_COVER_POLICY.present(state, on_suppressed=record_guard_suppressed)


@dataclass(frozen=True, slots=True)
class HideSensitiveDataCoverIfPresent(StateUpdater):
    """Remove o cover de dados sensíveis, se estiver ativo."""

    name: ClassVar[str] = "hide-sensitive-cover-if-present"

    def update_state(self, state: AppState) -> AppState:
        return SENSITIVE_COVER_POLICY.dismiss(state, on_suppressed=record_guard_suppressed)
