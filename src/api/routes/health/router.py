"""Endpoint de liveness."""

from __future__ import annotations

from datetime import UTC, datetime

from fastapi import APIRouter, Request
from pydantic import BaseModel

router = APIRouter()


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    service: str
    timestamp: str
    coordinator: str
    version: str = "1.0.0"


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request) -> HealthResponse:
    """Liveness: serviço no ar e estado do coordinator."""
    coordinator = getattr(request.app.state, "coordinator", None)
    if coordinator is None:
        coordinator_status = "not_configured"
    elif coordinator.is_closed:
        coordinator_status = "closed"
    else:
        coordinator_status = "running"
    return HealthResponse(
        status="healthy",
        service="effect-core",
        timestamp=datetime.now(UTC).isoformat(),
        coordinator=coordinator_status,
    )
