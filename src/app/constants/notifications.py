"""Conjuntos de IDs de notificação usados no roteamento.

Fixos em build; não são configuráveis em runtime.
"""

from __future__ import annotations

# Notificações de atualização obrigatória → abre a página da loja
UPDATE_REQUIRED_NOTIFICATION_IDS: frozenset[str] = frozenset({
    "force-update-1",
    "force-update-2",
})

# Notificações de mudança de status → home + sugestões
STATUS_CHANGE_NOTIFICATION_IDS: frozenset[str] = frozenset({
    "status-change-contact",
    "status-change-reminder",
})
