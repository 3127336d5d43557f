"""Predicados puros sobre o estado, usados em esperas."""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.constants.surfaces import SurfaceId
from effects.surfaces import SurfaceStack

if TYPE_CHECKING:
    from app.state.models import AppState


def tab_bar_is_active(state: AppState) -> bool:
    """App terminou o boot: a tab bar está entre as superfícies ativas."""
    return SurfaceStack.from_state(state).contains(SurfaceId.TAB_BAR)
