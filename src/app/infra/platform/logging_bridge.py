"""Ponte de plataforma sem IO: registra as requisições em log.

Usada em deploys headless e em desenvolvimento.
"""

from __future__ import annotations

import logging

from app.protocols.platform_bridge import PlatformBridgeProtocol
from config.settings.platform import SYSTEM_SETTINGS_URL

logger = logging.getLogger(__name__)


class LoggingPlatformBridge(PlatformBridgeProtocol):
    """Registra requisições à plataforma sem executá-las."""

    def __init__(self, system_settings_url: str = SYSTEM_SETTINGS_URL) -> None:
        self._system_settings_url = system_settings_url
        self.requests: list[str] = []

    async def open_external_url(self, url: str) -> None:
        self.requests.append(url)
        logger.info("platform_request_logged", extra={"url": url})

    async def open_system_settings(self) -> None:
        await self.open_external_url(self._system_settings_url)
