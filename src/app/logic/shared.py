"""Efeitos compartilhados: notificações, URLs externas, loja e ajustes."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar

from pydantic import AnyUrl, TypeAdapter, ValidationError

from app.constants.surfaces import Tab
from app.logic.predicates import tab_bar_is_active
from app.logic.suggestions import ShowSuggestions
from app.state.models import AppState
from effects.chain import ChainEffect, ChainStep
from effects.types import Effect, StateUpdater
from utils.errors import EffectFailure

if TYPE_CHECKING:
    from effects.manager import EffectContext

logger = logging.getLogger(__name__)

_URL_ADAPTER: TypeAdapter[AnyUrl] = TypeAdapter(AnyUrl)


def validate_url(raw_url: str, effect_name: str) -> str:
    """Valida a URL antes de enviá-la à plataforma.

    Raises:
        EffectFailure: URL malformada
    """
    try:
        _URL_ADAPTER.validate_python(raw_url)
    except ValidationError as exc:
        raise EffectFailure(
            f"URL malformada ({exc.error_count()} erro(s))",
            effect_name,
        ) from exc
    return raw_url


@dataclass(frozen=True, slots=True)
class HandleNotificationResponse(Effect):
    """Trata o toque do usuário em uma notificação entregue.

    Cada efeito casado pelo router é despachado individualmente, sem
    ordem entre eles. `routed` reaproveita um roteamento já feito pelo
    chamador; quando None o efeito consulta o router.
    """

    name: ClassVar[str] = "handle-notification-response"

    notification_id: str
    routed: tuple[Effect, ...] | None = field(default=None, compare=False)

    async def run(self, context: EffectContext) -> None:
        effects = self.routed
        if effects is None:
            effects = context.dependencies.router.route(self.notification_id)
        for effect in effects:
            context.dispatch(effect)


@dataclass(frozen=True, slots=True)
class OpenAppStorePage(Effect):
    """Abre a página do app na loja."""

    name: ClassVar[str] = "open-app-store-page"

    async def run(self, context: EffectContext) -> None:
        bundle = context.dependencies.bundle
        relative_url = f"app/id{bundle.app_store_id}" if bundle.app_store_id else ""
        url = validate_url(f"{bundle.app_store_base_url}{relative_url}", self.name)
        await context.dependencies.platform.open_external_url(url)


@dataclass(frozen=True, slots=True)
class OpenURL(Effect):
    """Abre uma URL no navegador padrão e aguarda a plataforma."""

    name: ClassVar[str] = "open-url"

    url: str

    async def run(self, context: EffectContext) -> None:
        url = validate_url(self.url, self.name)
        await context.dependencies.platform.open_external_url(url)


@dataclass(frozen=True, slots=True)
class OpenExternalLink(Effect):
    """Abre um link externo sem aguardar a plataforma.

    Só a validação da URL falha aqui; erros da plataforma ficam no
    despacho fire-and-forget de OpenURL (registrados em log).
    """

    name: ClassVar[str] = "open-external-link"

    url: str

    async def run(self, context: EffectContext) -> None:
        validate_url(self.url, self.name)
        context.dispatch(OpenURL(self.url))


@dataclass(frozen=True, slots=True)
class OpenSettings(Effect):
    """Abre a página de ajustes do app no sistema."""

    name: ClassVar[str] = "open-settings"

    async def run(self, context: EffectContext) -> None:
        await context.dependencies.platform.open_system_settings()


@dataclass(frozen=True, slots=True)
class UpdateSelectedTab(StateUpdater):
    """Atualiza a aba selecionada; idempotente (mesma aba = sem notificação)."""

    name: ClassVar[str] = "switch-tab"

    tab: Tab

    def update_state(self, state: AppState) -> AppState:
        if state.selected_tab == self.tab:
            return state
        return state.with_selected_tab(self.tab)


@dataclass(frozen=True, slots=True)
class HandleStatusChangeNotification(ChainEffect):
    """Reage a notificação de mudança de status.

    Espera a tab bar aparecer (a espera sobrevive até o processo
    terminar), muda para a aba home e apresenta as sugestões.
    """

    name: ClassVar[str] = "handle-status-change-notification"

    def steps(self) -> Sequence[ChainStep]:
        return (
            ChainStep(UpdateSelectedTab(Tab.HOME), predicate=tab_bar_is_active),
            ChainStep(ShowSuggestions()),
        )
