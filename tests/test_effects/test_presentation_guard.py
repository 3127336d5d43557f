"""Testes dos guards de apresentação e dispensa de overlays."""

from __future__ import annotations

import logging
from unittest.mock import MagicMock

import pytest

from effects.rules import (
    GuardedPresentationPolicy,
    GuardResult,
    evaluate_presentation,
    should_dismiss,
    should_present,
)
from tests.fakes.fake_state import ScreenState

PRESENTERS = frozenset({"tab-bar", "onboarding"})
BLOCKERS = frozenset({"sensitive-cover", "permission-overlay"})


def _policy() -> GuardedPresentationPolicy:
    return GuardedPresentationPolicy("sensitive-cover", PRESENTERS, BLOCKERS)


class TestShouldPresent:
    @pytest.mark.parametrize(
        ("active", "expected"),
        [
            # presenter ativo, sem bloqueador
            ({"tab-bar"}, True),
            # presenter ativo, com bloqueador
            ({"tab-bar", "permission-overlay"}, False),
            # sem presenter, sem bloqueador
            ({"splash"}, False),
            # sem presenter, com bloqueador
            ({"splash", "sensitive-cover"}, False),
        ],
    )
    def test_four_quadrants(self, active: set[str], expected: bool) -> None:
        assert should_present("sensitive-cover", PRESENTERS, BLOCKERS, active) is expected

    def test_sensitive_cover_example(self) -> None:
        """Cover aparece sobre a tab bar e não sobre o overlay de permissão."""
        presenters = {"tab-bar", "onboarding"}
        blockers = {"sensitive-cover", "permission-overlay"}
        assert should_present("sensitive-cover", presenters, blockers, {"tab-bar"}) is True
        assert (
            should_present(
                "sensitive-cover",
                presenters,
                blockers,
                {"tab-bar", "permission-overlay"},
            )
            is False
        )

    def test_empty_active_set_never_presents(self) -> None:
        assert should_present("sensitive-cover", PRESENTERS, BLOCKERS, set()) is False

    def test_target_does_not_change_rule(self) -> None:
        assert should_present("anything", PRESENTERS, BLOCKERS, {"onboarding"}) is True

    def test_denied_reason_names_blockers(self) -> None:
        result = evaluate_presentation(
            "sensitive-cover",
            PRESENTERS,
            BLOCKERS,
            {"tab-bar", "permission-overlay", "sensitive-cover"},
        )
        assert not result
        assert result.reason == (
            "sensitive-cover: bloqueado por permission-overlay, sensitive-cover"
        )


class TestShouldDismiss:
    def test_true_only_when_target_active(self) -> None:
        assert should_dismiss("sensitive-cover", {"tab-bar", "sensitive-cover"}) is True
        assert should_dismiss("sensitive-cover", {"tab-bar"}) is False

    def test_idempotent_in_succession(self) -> None:
        """Segunda chamada observa o alvo já removido."""
        active = {"tab-bar", "sensitive-cover"}
        first = should_dismiss("sensitive-cover", active)
        active.discard("sensitive-cover")
        second = should_dismiss("sensitive-cover", active)
        assert (first, second) == (True, False)


class TestGuardResult:
    def test_allow_and_deny(self) -> None:
        assert GuardResult.allow()
        denied = GuardResult.deny("motivo")
        assert not denied
        assert denied.reason == "motivo"


class TestGuardedPresentationPolicy:
    def test_present_pushes_target(self) -> None:
        state = ScreenState(("tab-bar",))
        new_state = _policy().present(state)
        assert new_state.active_surfaces == ("tab-bar", "sensitive-cover")

    def test_present_suppressed_returns_same_state(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="effects.rules.presentation")
        on_suppressed = MagicMock()
        state = ScreenState(("tab-bar", "permission-overlay"))

        assert _policy().present(state, on_suppressed=on_suppressed) is state

        on_suppressed.assert_called_once()
        target, reason = on_suppressed.call_args[0]
        assert target == "sensitive-cover"
        assert "permission-overlay" in reason
        records = [r for r in caplog.records if r.getMessage() == "guard_suppressed"]
        assert len(records) == 1
        assert records[0].levelno == logging.DEBUG

    def test_present_twice_is_blocked_by_itself(self) -> None:
        policy = _policy()
        once = policy.present(ScreenState(("tab-bar",)))
        assert policy.present(once) is once

    def test_dismiss_removes_target_then_is_noop(self) -> None:
        policy = _policy()
        state = ScreenState(("tab-bar", "sensitive-cover"))
        dismissed = policy.dismiss(state)
        assert dismissed.active_surfaces == ("tab-bar",)
        assert policy.dismiss(dismissed) is dismissed

    def test_sets_are_frozen(self) -> None:
        policy = GuardedPresentationPolicy("x", ["a"], ["b"])
        assert policy.presenters == frozenset({"a"})
        assert policy.blockers == frozenset({"b"})
