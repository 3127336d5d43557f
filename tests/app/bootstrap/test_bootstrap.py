"""Testes do composition root."""

from __future__ import annotations

import pytest

from app.bootstrap import (
    create_app_dependencies,
    create_coordinator,
    create_platform_bridge,
    create_state_store,
    validate_runtime_settings,
)
from app.infra.platform import LoggingPlatformBridge, WebBrowserPlatformBridge
from app.state.models import AppState
from config.settings import CoordinatorSettings, PlatformSettings


class TestFactories:
    def test_each_store_is_isolated(self) -> None:
        first = create_state_store()
        second = create_state_store()
        first.update(lambda s: s.with_active_surfaces(("tab-bar",)))
        assert second.get_state() == AppState()

    @pytest.mark.parametrize(
        ("backend", "expected"),
        [("log", LoggingPlatformBridge), ("webbrowser", WebBrowserPlatformBridge)],
    )
    def test_platform_bridge_backend(self, backend: str, expected: type) -> None:
        bridge = create_platform_bridge(PlatformSettings(bridge_backend=backend))  # type: ignore[arg-type]
        assert isinstance(bridge, expected)

    def test_dependencies_carry_bundle_info(self) -> None:
        dependencies = create_app_dependencies(settings=PlatformSettings(app_store_id="42"))
        assert dependencies.bundle.app_store_id == "42"
        assert {rule.name for rule in dependencies.router.rules} == {
            "update_required",
            "status_change",
        }

    def test_coordinator_uses_settings(self) -> None:
        coordinator = create_coordinator(
            settings=CoordinatorSettings(history_size=3, wait_timeout_seconds=1.5)
        )
        assert coordinator.state == AppState()
        assert coordinator.is_closed is False


class TestValidateRuntimeSettings:
    def test_development_only_warns(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "development")
        monkeypatch.setenv("APP_STORE_ID", "not-digits")
        validate_runtime_settings()

    def test_production_fails_fast(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.delenv("APP_STORE_ID", raising=False)
        monkeypatch.delenv("DEBUG", raising=False)
        with pytest.raises(RuntimeError, match="APP_STORE_ID obrigatório"):
            validate_runtime_settings()

    def test_production_with_valid_settings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.delenv("PLATFORM_BRIDGE_BACKEND", raising=False)
        monkeypatch.setenv("APP_STORE_ID", "1234567")
        monkeypatch.delenv("DEBUG", raising=False)
        monkeypatch.delenv("EFFECT_HISTORY_SIZE", raising=False)
        validate_runtime_settings()

    def test_staging_rejects_unknown_bridge_backend(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "staging")
        monkeypatch.setenv("PLATFORM_BRIDGE_BACKEND", "carrier-pigeon")
        with pytest.raises(RuntimeError, match="PLATFORM_BRIDGE_BACKEND inválido"):
            validate_runtime_settings()
