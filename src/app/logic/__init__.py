"""Lógica da aplicação: efeitos concretos sobre o núcleo `effects`.

Módulos:
- shared: notificações, URLs externas, loja, ajustes, aba selecionada
- surfaces: apresentação/dispensa de superfícies e do cover sensível
- suggestions: tela de sugestões
- predicates: predicados de estado usados em esperas
- routing: regras de roteamento de notificações (dados)
"""

from app.logic.predicates import tab_bar_is_active
from app.logic.routing import build_default_routing_rules, create_notification_router
from app.logic.shared import (
    HandleNotificationResponse,
    HandleStatusChangeNotification,
    OpenAppStorePage,
    OpenExternalLink,
    OpenSettings,
    OpenURL,
    UpdateSelectedTab,
)
from app.logic.suggestions import ShowSuggestions
from app.logic.surfaces import (
    SENSITIVE_COVER_POLICY,
    Hide,
    HideSensitiveDataCoverIfPresent,
    Show,
    ShowSensitiveDataCoverIfNeeded,
    SyncActiveSurfaces,
)

__all__ = [
    "SENSITIVE_COVER_POLICY",
    "HandleNotificationResponse",
    "HandleStatusChangeNotification",
    "Hide",
    "HideSensitiveDataCoverIfPresent",
    "OpenAppStorePage",
    "OpenExternalLink",
    "OpenSettings",
    "OpenURL",
    "Show",
    "ShowSensitiveDataCoverIfNeeded",
    "ShowSuggestions",
    "SyncActiveSurfaces",
    "UpdateSelectedTab",
    "build_default_routing_rules",
    "create_notification_router",
    "tab_bar_is_active",
]
