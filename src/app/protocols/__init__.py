"""Protocolos e contratos do core da aplicação."""

from .platform_bridge import PlatformBridgeProtocol

__all__ = ["PlatformBridgeProtocol"]
