"""Enums de domínio para superfícies e abas da aplicação."""

from __future__ import annotations

from enum import StrEnum


class SurfaceId(StrEnum):
    """Superfícies (telas/overlays) que podem estar ativas.

    Os valores comparam igual a strings simples, então conjuntos de
    guard podem ser declarados com qualquer uma das formas.
    """

    SPLASH = "splash"
    TAB_BAR = "tab-bar"
    ONBOARDING_STEP = "onboarding"
    SENSITIVE_DATA_COVER = "sensitive-cover"
    PERMISSION_OVERLAY = "permission-overlay"
    SUGGESTIONS = "suggestions"


class Tab(StrEnum):
    """Abas da tab bar."""

    HOME = "home"
    SETTINGS = "settings"


# Superfícies que podem apresentar o cover de dados sensíveis
SENSITIVE_COVER_PRESENTERS: frozenset[str] = frozenset({
    SurfaceId.TAB_BAR,
    SurfaceId.ONBOARDING_STEP,
})

# Superfícies que, se ativas, impedem o cover
SENSITIVE_COVER_BLOCKERS: frozenset[str] = frozenset({
    # evita dupla apresentação
    SurfaceId.SENSITIVE_DATA_COVER,
    # alerta nativo de permissão precisa ficar visível
    SurfaceId.PERMISSION_OVERLAY,
})
