"""API: camada de borda HTTP.

Responsabilidades:
- Receber eventos da plataforma (notificações, pilha de superfícies)
- Validar payloads (pydantic)
- Delegar para use cases e para o EffectCoordinator

Subpastas:
- routes/: endpoints HTTP (health, notifications, surfaces)

NÃO PODE conter: regras de guard, roteamento de notificações, efeitos.
"""
