"""Factories de dependências: conecta implementações aos protocolos."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from app.infra.platform import LoggingPlatformBridge, WebBrowserPlatformBridge
from app.infra.stores.memory_state_store import InMemoryStateStore
from app.logic.routing import create_notification_router
from app.observability.metrics import record_effect_outcome
from app.state.models import AppState
from config.settings import (
    APP_STORE_BASE_URL,
    CoordinatorSettings,
    PlatformSettings,
    get_coordinator_settings,
    get_platform_settings,
)
from effects.manager import EffectCoordinator

if TYPE_CHECKING:
    from app.protocols.platform_bridge import PlatformBridgeProtocol
    from effects.routing import NotificationRouter

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class BundleInfo:
    """Metadados do app usados para montar URLs da loja."""

    app_store_id: str = ""
    app_store_base_url: str = APP_STORE_BASE_URL


@dataclass(frozen=True, slots=True)
class AppDependencies:
    """Colaboradores externos entregues aos efeitos via contexto."""

    platform: PlatformBridgeProtocol
    router: NotificationRouter
    bundle: BundleInfo = BundleInfo()


def create_state_store(initial_state: AppState | None = None) -> InMemoryStateStore[AppState]:
    """Cria store de estado isolado (estado inicial padrão quando None)."""
    return InMemoryStateStore(initial_state if initial_state is not None else AppState())


def create_platform_bridge(settings: PlatformSettings | None = None) -> PlatformBridgeProtocol:
    """Cria ponte de plataforma conforme PLATFORM_BRIDGE_BACKEND."""
    settings = settings or get_platform_settings()
    if settings.bridge_backend == "webbrowser":
        return WebBrowserPlatformBridge(settings.system_settings_url)
    return LoggingPlatformBridge(settings.system_settings_url)


def create_app_dependencies(
    platform: PlatformBridgeProtocol | None = None,
    router: NotificationRouter | None = None,
    settings: PlatformSettings | None = None,
) -> AppDependencies:
    """Monta AppDependencies; parâmetros informados substituem os padrões."""
    settings = settings or get_platform_settings()
    return AppDependencies(
        platform=platform or create_platform_bridge(settings),
        router=router or create_notification_router(),
        bundle=BundleInfo(
            app_store_id=settings.app_store_id,
            app_store_base_url=settings.app_store_base_url,
        ),
    )


def create_coordinator(
    store: InMemoryStateStore[AppState] | None = None,
    dependencies: AppDependencies | None = None,
    settings: CoordinatorSettings | None = None,
) -> EffectCoordinator:
    """Cria EffectCoordinator com store, dependências e métricas conectados."""
    settings = settings or get_coordinator_settings()
    coordinator = EffectCoordinator(
        store or create_state_store(),
        dependencies or create_app_dependencies(),
        history_size=settings.history_size,
        default_wait_timeout=settings.wait_timeout_seconds,
        on_outcome=record_effect_outcome,
    )
    logger.info(
        "effect_coordinator_created",
        extra={
            "component": "bootstrap",
            "history_size": settings.history_size,
            "wait_timeout_seconds": settings.wait_timeout_seconds,
        },
    )
    return coordinator
