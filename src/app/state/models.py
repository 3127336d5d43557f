"""Modelo do estado da aplicação.

Apenas os campos usados pelos efeitos. Instâncias são imutáveis;
toda mudança gera um novo AppState via `with_*` e é aplicada pelo
update atômico do store. Igualdade é campo a campo.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from app.constants.surfaces import Tab


class EnvironmentState(BaseModel):
    """Estado de ambiente da sessão corrente."""

    model_config = ConfigDict(frozen=True)

    selected_tab: Tab = Tab.HOME


class AppState(BaseModel):
    """Estado global da aplicação (instância explícita, nunca global).

    Attributes:
        environment: Estado de ambiente (aba selecionada)
        active_surfaces: Superfícies ativas, a mais recente por último
    """

    model_config = ConfigDict(frozen=True)

    environment: EnvironmentState = Field(default_factory=EnvironmentState)
    active_surfaces: tuple[str, ...] = ()

    @property
    def selected_tab(self) -> Tab:
        return self.environment.selected_tab

    def with_selected_tab(self, tab: Tab) -> AppState:
        """Retorna cópia com a aba selecionada alterada."""
        environment = self.environment.model_copy(update={"selected_tab": tab})
        return self.model_copy(update={"environment": environment})

    def with_active_surfaces(self, surfaces: tuple[str, ...]) -> AppState:
        """Retorna cópia com a pilha de superfícies substituída."""
        return self.model_copy(update={"active_surfaces": tuple(str(s) for s in surfaces)})

    def to_snapshot(self) -> dict[str, Any]:
        """Representação JSON-safe para API e logs."""
        return self.model_dump(mode="json")
