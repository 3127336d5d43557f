"""Settings da ponte com a plataforma (abrir URLs, loja, ajustes)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from config.settings.base.core import BaseSettings

PlatformBridgeBackend = Literal["log", "webbrowser"]

APP_STORE_BASE_URL: str = "https://itunes.apple.com/"
SYSTEM_SETTINGS_URL: str = "app-settings:"


@dataclass(frozen=True)
class PlatformSettings:
    """Configurações da ponte com a plataforma.

    Attributes:
        bridge_backend: Implementação da ponte (log|webbrowser)
        app_store_id: ID do app na loja (vazio = página base da loja)
        app_store_base_url: URL base da listagem na loja
        system_settings_url: URL que abre os ajustes do app no sistema
    """

    bridge_backend: PlatformBridgeBackend = "log"
    app_store_id: str = ""
    app_store_base_url: str = APP_STORE_BASE_URL
    system_settings_url: str = SYSTEM_SETTINGS_URL

    def validate(self, base: BaseSettings) -> list[str]:
        """Valida configurações da plataforma.

        Args:
            base: BaseSettings para verificar ambiente.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []

        if self.bridge_backend not in {"log", "webbrowser"}:
            errors.append(f"PLATFORM_BRIDGE_BACKEND inválido: {self.bridge_backend}")

        if not self.app_store_base_url.endswith("/"):
            errors.append("APP_STORE_BASE_URL deve terminar com '/'")

        if self.app_store_id and not self.app_store_id.isdigit():
            errors.append("APP_STORE_ID deve conter apenas dígitos")

        if base.is_production and not self.app_store_id:
            errors.append("APP_STORE_ID obrigatório em production")

        return errors


def _load_platform_from_env() -> PlatformSettings:
    """Carrega PlatformSettings de variáveis de ambiente."""
    backend = os.getenv("PLATFORM_BRIDGE_BACKEND", "log").strip().lower()
    return PlatformSettings(
        bridge_backend=backend,  # type: ignore[arg-type]
        app_store_id=os.getenv("APP_STORE_ID", ""),
        app_store_base_url=os.getenv("APP_STORE_BASE_URL", APP_STORE_BASE_URL),
        system_settings_url=os.getenv("SYSTEM_SETTINGS_URL", SYSTEM_SETTINGS_URL),
    )


@lru_cache(maxsize=1)
def get_platform_settings() -> PlatformSettings:
    """Retorna instância cacheada de PlatformSettings."""
    return _load_platform_from_env()
