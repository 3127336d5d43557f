"""Dependências FastAPI compartilhadas pelas rotas."""

from __future__ import annotations

from fastapi import HTTPException, Request

from effects.manager import EffectCoordinator


def get_coordinator(request: Request) -> EffectCoordinator:
    """Obtém o coordinator criado no lifespan da aplicação.

    Raises:
        HTTPException: 503 se o coordinator não existe ou foi encerrado
    """
    coordinator = getattr(request.app.state, "coordinator", None)
    if coordinator is None or coordinator.is_closed:
        raise HTTPException(status_code=503, detail="coordinator_unavailable")
    return coordinator
