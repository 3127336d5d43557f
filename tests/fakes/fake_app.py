"""Montagem de coordinator isolado com plataforma falsa."""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.bootstrap import create_app_dependencies, create_coordinator, create_state_store
from config.settings import CoordinatorSettings, PlatformSettings
from tests.fakes.fake_platform_bridge import FakePlatformBridge

if TYPE_CHECKING:
    from app.state.models import AppState
    from effects.manager import EffectCoordinator
    from effects.routing import NotificationRouter

TEST_APP_STORE_ID = "1234567"


def build_coordinator(
    state: AppState | None = None,
    *,
    platform: FakePlatformBridge | None = None,
    router: NotificationRouter | None = None,
    app_store_id: str = TEST_APP_STORE_ID,
    app_store_base_url: str = "https://itunes.apple.com/",
    wait_timeout_seconds: float | None = None,
) -> EffectCoordinator:
    """Coordinator com store próprio; nada é compartilhado entre testes."""
    dependencies = create_app_dependencies(
        platform=platform or FakePlatformBridge(),
        router=router,
        settings=PlatformSettings(
            app_store_id=app_store_id,
            app_store_base_url=app_store_base_url,
        ),
    )
    return create_coordinator(
        store=create_state_store(state),
        dependencies=dependencies,
        settings=CoordinatorSettings(wait_timeout_seconds=wait_timeout_seconds),
    )
