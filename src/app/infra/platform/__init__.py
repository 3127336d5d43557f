"""Implementações concretas da ponte com a plataforma."""

from app.infra.platform.logging_bridge import LoggingPlatformBridge
from app.infra.platform.webbrowser_bridge import WebBrowserPlatformBridge

__all__ = [
    "LoggingPlatformBridge",
    "WebBrowserPlatformBridge",
]
