"""Agregador de settings do núcleo de efeitos.

Re-exporta todas as settings e funções de cada módulo.
"""

from __future__ import annotations

from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)
from config.settings.coordinator import (
    CoordinatorSettings,
    get_coordinator_settings,
)
from config.settings.platform import (
    APP_STORE_BASE_URL,
    SYSTEM_SETTINGS_URL,
    PlatformBridgeBackend,
    PlatformSettings,
    get_platform_settings,
)

__all__ = [
    # Constants
    "APP_STORE_BASE_URL",
    "SYSTEM_SETTINGS_URL",
    # Base
    "BaseSettings",
    # Coordinator
    "CoordinatorSettings",
    "Environment",
    # Platform
    "PlatformBridgeBackend",
    "PlatformSettings",
    "get_base_settings",
    "get_coordinator_settings",
    "get_platform_settings",
]
