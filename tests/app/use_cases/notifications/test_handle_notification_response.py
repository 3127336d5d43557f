"""Testes do use case handle_notification_response."""

from __future__ import annotations

import logging

import pytest

from app.constants.surfaces import Tab
from app.logic.routing import UPDATE_REQUIRED_RULE
from app.logic.shared import OpenAppStorePage
from app.observability import get_correlation_id
from app.state.models import AppState
from app.use_cases.notifications import handle_notification_response
from effects.routing import NotificationRouter, RoutingRule
from tests.fakes.fake_app import TEST_APP_STORE_ID, build_coordinator
from tests.fakes.fake_platform_bridge import FakePlatformBridge
from tests.fakes.fake_state import drain_effects


class TestHandleNotificationResponse:
    @pytest.mark.asyncio
    async def test_unknown_id_is_silently_ignored(self) -> None:
        coordinator = build_coordinator()

        summary = await handle_notification_response(coordinator, "never-configured")

        assert summary.matched is False
        assert summary.dispatched == 0
        assert summary.failed is False
        assert coordinator.history == []

    @pytest.mark.asyncio
    async def test_update_required_opens_store_listing(self) -> None:
        platform = FakePlatformBridge()
        coordinator = build_coordinator(
            AppState().with_selected_tab(Tab.SETTINGS),
            platform=platform,
        )

        summary = await handle_notification_response(coordinator, "force-update-2")
        await drain_effects(coordinator)

        assert summary.matched_rules == (UPDATE_REQUIRED_RULE,)
        assert summary.dispatched == 1
        assert platform.opened_urls == [f"https://itunes.apple.com/app/id{TEST_APP_STORE_ID}"]
        assert coordinator.state.selected_tab == Tab.SETTINGS

    @pytest.mark.asyncio
    async def test_correlation_id_is_kept_and_restored(self) -> None:
        coordinator = build_coordinator()

        summary = await handle_notification_response(
            coordinator,
            "force-update-1",
            correlation_id="corr-abc",
        )
        await drain_effects(coordinator)

        assert summary.correlation_id == "corr-abc"
        assert get_correlation_id() == ""

    @pytest.mark.asyncio
    async def test_generates_correlation_id_when_missing(self) -> None:
        summary = await handle_notification_response(build_coordinator(), "never-configured")
        assert len(summary.correlation_id) == 36

    @pytest.mark.asyncio
    async def test_failure_is_reduced_to_log(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.INFO)

        def _broken_builder(notification_id: str):  # type: ignore[no-untyped-def]
            raise LookupError(notification_id)

        router = NotificationRouter([RoutingRule("broken", frozenset({"n-1"}), _broken_builder)])
        coordinator = build_coordinator(router=router)

        summary = await handle_notification_response(coordinator, "n-1")

        assert summary.failed is True
        assert summary.dispatched == 0
        assert summary.matched_rules == ("broken",)
        fallbacks = [r for r in caplog.records if getattr(r, "fallback_used", False)]
        assert len(fallbacks) == 1
        assert fallbacks[0].component == "notification_response"

    @pytest.mark.asyncio
    async def test_each_matched_rule_builds_its_effect_once(self) -> None:
        built: list[str] = []

        def _counting_builder(notification_id: str) -> OpenAppStorePage:
            built.append(notification_id)
            return OpenAppStorePage()

        router = NotificationRouter(
            [RoutingRule("counted", frozenset({"n-1"}), _counting_builder)]
        )
        coordinator = build_coordinator(router=router)

        summary = await handle_notification_response(coordinator, "n-1")
        await drain_effects(coordinator)

        assert summary.dispatched == 1
        assert built == ["n-1"]
