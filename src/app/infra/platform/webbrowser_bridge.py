"""Ponte de plataforma baseada no módulo `webbrowser`.

Chamadas bloqueantes rodam em thread (asyncio.to_thread) para não
segurar o event loop.
"""

from __future__ import annotations

import asyncio
import logging
import webbrowser

from app.protocols.platform_bridge import PlatformBridgeProtocol
from config.settings.platform import SYSTEM_SETTINGS_URL
from utils.errors import PlatformUnavailableError

logger = logging.getLogger(__name__)


class WebBrowserPlatformBridge(PlatformBridgeProtocol):
    """Abre URLs no navegador padrão do sistema."""

    def __init__(self, system_settings_url: str = SYSTEM_SETTINGS_URL) -> None:
        self._system_settings_url = system_settings_url

    async def open_external_url(self, url: str) -> None:
        opened = await asyncio.to_thread(webbrowser.open, url)
        if not opened:
            raise PlatformUnavailableError("navegador indisponível para abrir URL")
        logger.info("platform_url_opened", extra={"scheme": url.split(":", 1)[0]})

    async def open_system_settings(self) -> None:
        await self.open_external_url(self._system_settings_url)
