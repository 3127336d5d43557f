"""Protocolo da ponte com a plataforma (shell do sistema operacional)."""

from __future__ import annotations

from abc import ABC, abstractmethod


class PlatformBridgeProtocol(ABC):
    """Requisições best-effort ao shell da plataforma.

    Nenhum retorno é garantido; falhas devem ser sinalizadas com
    PlatformUnavailableError.
    """

    @abstractmethod
    async def open_external_url(self, url: str) -> None:
        """Abre URL no navegador/handler padrão."""

    @abstractmethod
    async def open_system_settings(self) -> None:
        """Abre a página de ajustes do app no sistema."""
