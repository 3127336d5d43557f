"""Endpoints de superfícies: pilha ativa, cover sensível e estado.

A camada de apresentação é dona da navegação; ela reporta aqui a
pilha de superfícies ativas e os eventos de ciclo de vida que pedem
o cover de dados sensíveis.
"""

from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, Field

from api.dependencies import get_coordinator
from app.constants.surfaces import SurfaceId
from app.logic.surfaces import (
    HideSensitiveDataCoverIfPresent,
    ShowSensitiveDataCoverIfNeeded,
    SyncActiveSurfaces,
)
from effects.manager import EffectCoordinator

router = APIRouter()


class SurfacesSyncRequest(BaseModel):
    """Pilha de superfícies ativas, a mais recente por último."""

    model_config = ConfigDict(extra="ignore")

    active: list[SurfaceId] = Field(default_factory=list, max_length=64)


class StateChangeResult(BaseModel):
    """Resultado de um efeito de estado."""

    effect: str
    state_changed: bool
    active_surfaces: list[str]


@router.put("/surfaces", response_model=StateChangeResult)
async def sync_surfaces(
    payload: SurfacesSyncRequest,
    coordinator: Annotated[EffectCoordinator, Depends(get_coordinator)],
) -> StateChangeResult:
    """Sincroniza a pilha de superfícies reportada pela apresentação."""
    effect = SyncActiveSurfaces(tuple(str(surface) for surface in payload.active))
    outcome = await coordinator.dispatch_and_await(effect)
    return _state_change_result(coordinator, outcome.effect_name, outcome.state_changed)


@router.post("/cover/show", response_model=StateChangeResult)
async def show_sensitive_cover(
    coordinator: Annotated[EffectCoordinator, Depends(get_coordinator)],
) -> StateChangeResult:
    """Apresenta o cover sensível se o guard permitir (supressão não é erro)."""
    outcome = await coordinator.dispatch_and_await(ShowSensitiveDataCoverIfNeeded())
    return _state_change_result(coordinator, outcome.effect_name, outcome.state_changed)


@router.post("/cover/hide", response_model=StateChangeResult)
async def hide_sensitive_cover(
    coordinator: Annotated[EffectCoordinator, Depends(get_coordinator)],
) -> StateChangeResult:
    """Remove o cover sensível se estiver ativo (idempotente)."""
    outcome = await coordinator.dispatch_and_await(HideSensitiveDataCoverIfPresent())
    return _state_change_result(coordinator, outcome.effect_name, outcome.state_changed)


@router.get("/state")
async def read_state(
    coordinator: Annotated[EffectCoordinator, Depends(get_coordinator)],
) -> dict[str, Any]:
    """Snapshot do estado corrente."""
    return coordinator.state.to_snapshot()


def _state_change_result(
    coordinator: EffectCoordinator,
    effect_name: str,
    state_changed: bool | None,
) -> StateChangeResult:
    return StateChangeResult(
        effect=effect_name,
        state_changed=bool(state_changed),
        active_surfaces=list(coordinator.state.active_surfaces),
    )
