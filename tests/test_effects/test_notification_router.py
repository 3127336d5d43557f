"""Testes do NotificationRouter."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

import pytest

from effects.routing import NotificationRouter, RoutingRule
from effects.types import Effect
from utils.errors import EffectFailure

if TYPE_CHECKING:
    from effects.manager import EffectContext


@dataclass(frozen=True, slots=True)
class Marker(Effect):
    name: ClassVar[str] = "marker"

    label: str

    async def run(self, context: EffectContext) -> None:
        return None


def _rule(name: str, ids: set[str], label: str | None = None) -> RoutingRule:
    return RoutingRule(
        name=name,
        notification_ids=frozenset(ids),
        build_effect=lambda _notification_id: Marker(label or name),
    )


@pytest.fixture
def router() -> NotificationRouter:
    return NotificationRouter(
        [
            _rule("update_required", {"force-update-1", "force-update-2"}),
            _rule("status_change", {"status-42", "shared-7"}),
            _rule("promo", {"shared-7"}),
        ]
    )


class TestRoute:
    def test_unknown_id_routes_to_nothing(self, router: NotificationRouter) -> None:
        assert router.route("never-configured") == ()
        assert router.match("never-configured") == ()

    def test_single_set_routes_to_its_effect(self, router: NotificationRouter) -> None:
        assert router.route("force-update-1") == (Marker("update_required"),)

    def test_multiple_sets_route_to_union(self, router: NotificationRouter) -> None:
        effects = router.route("shared-7")
        assert set(effects) == {Marker("status_change"), Marker("promo")}
        assert {rule.name for rule in router.match("shared-7")} == {"status_change", "promo"}

    def test_identical_effects_are_deduplicated(self) -> None:
        router = NotificationRouter(
            [
                _rule("a", {"x"}, label="same"),
                _rule("b", {"x"}, label="same"),
            ]
        )
        assert router.route("x") == (Marker("same"),)

    def test_builder_receives_notification_id(self) -> None:
        router = NotificationRouter(
            [RoutingRule("echo", frozenset({"n-1"}), lambda notification_id: Marker(notification_id))]
        )
        assert router.route("n-1") == (Marker("n-1"),)

    def test_builder_error_becomes_effect_failure(self) -> None:
        def _broken(notification_id: str) -> Effect:
            raise LookupError(notification_id)

        router = NotificationRouter([RoutingRule("broken", frozenset({"n-1"}), _broken)])
        with pytest.raises(EffectFailure, match="broken.*LookupError"):
            router.route("n-1")


class TestRoutingRule:
    def test_ids_are_coerced_to_frozenset(self) -> None:
        rule = RoutingRule("r", {"a", "b"}, lambda _: Marker("r"))  # type: ignore[arg-type]
        assert isinstance(rule.notification_ids, frozenset)
        assert rule.matches("a")
        assert not rule.matches("c")

    def test_empty_name_rejected(self) -> None:
        with pytest.raises(ValueError, match="name"):
            RoutingRule("", frozenset({"a"}), lambda _: Marker("x"))

    def test_duplicate_rule_names_rejected(self) -> None:
        with pytest.raises(ValueError, match="duplicadas: dup"):
            NotificationRouter([_rule("dup", {"a"}), _rule("dup", {"b"})])
