"""Rotas HTTP da API: adapters de entrada da plataforma.

Responsabilidades:
- Receber eventos da plataforma (toque em notificação, pilha de telas)
- Validar payloads (pydantic)
- Delegar para use cases / EffectCoordinator
- Respostas HTTP apropriadas

Estrutura:
- routes/health/: liveness
- routes/notifications/: resposta a notificações
- routes/surfaces/: sincronização de superfícies, cover sensível, estado

Agregação:
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
