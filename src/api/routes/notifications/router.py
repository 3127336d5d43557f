"""Endpoint de resposta a notificações (toque do usuário)."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Header
from pydantic import BaseModel, ConfigDict, Field

from api.dependencies import get_coordinator
from app.use_cases.notifications import handle_notification_response
from effects.manager import EffectCoordinator

router = APIRouter()


class NotificationResponseRequest(BaseModel):
    """Payload enviado pela plataforma quando a notificação é tocada."""

    model_config = ConfigDict(extra="ignore")

    notification_id: str = Field(..., min_length=1, max_length=256)


class NotificationResponseResult(BaseModel):
    """Resumo do roteamento devolvido à plataforma."""

    notification_id: str
    correlation_id: str
    matched_rules: list[str]
    dispatched: int
    failed: bool


@router.post("/response", status_code=202, response_model=NotificationResponseResult)
async def notification_response(
    payload: NotificationResponseRequest,
    coordinator: Annotated[EffectCoordinator, Depends(get_coordinator)],
    x_correlation_id: Annotated[str | None, Header()] = None,
) -> NotificationResponseResult:
    """Classifica a notificação e despacha os efeitos casados.

    ID sem regra não é erro: retorna 202 com `matched_rules` vazio.
    """
    summary = await handle_notification_response(
        coordinator,
        payload.notification_id,
        correlation_id=x_correlation_id,
    )
    return NotificationResponseResult(
        notification_id=summary.notification_id,
        correlation_id=summary.correlation_id,
        matched_rules=list(summary.matched_rules),
        dispatched=summary.dispatched,
        failed=summary.failed,
    )
