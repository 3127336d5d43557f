"""Efeitos da tela de sugestões."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from app.constants.surfaces import SurfaceId
from app.state.models import AppState
from effects.surfaces import SurfaceStack
from effects.types import StateUpdater


@dataclass(frozen=True, slots=True)
class ShowSuggestions(StateUpdater):
    """Apresenta a tela de sugestões sobre a aba corrente."""

    name: ClassVar[str] = "show-suggestions"

    def update_state(self, state: AppState) -> AppState:
        stack = SurfaceStack.from_state(state)
        return state.with_active_surfaces(stack.pushed(SurfaceId.SUGGESTIONS))
