"""Testes do executor de cadeias ordenadas."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

import pytest

from app.infra.stores import InMemoryStateStore
from effects.chain import ChainEffect, ChainStep, run_chain
from effects.manager import EffectCoordinator
from effects.types import Effect
from tests.fakes.fake_state import ScreenState, settle
from utils.errors import EffectFailure, WaitTimeoutError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from effects.manager import EffectContext


class Record(Effect):
    __slots__ = ("label", "sink")
    name = "record"

    def __init__(self, label: str, sink: list[str]) -> None:
        self.label = label
        self.sink = sink

    async def run(self, context: EffectContext) -> None:
        self.sink.append(self.label)


class Broken(Effect):
    __slots__ = ()
    name = "broken"

    async def run(self, context: EffectContext) -> None:
        raise EffectFailure("falha no passo")


class Chain(ChainEffect):
    __slots__ = ("_steps",)
    name = "test-chain"

    def __init__(self, *steps: ChainStep) -> None:
        self._steps = steps

    def steps(self) -> Sequence[ChainStep]:
        return self._steps


def _tab_bar_active(state: ScreenState) -> bool:
    return "tab-bar" in state.active_surfaces


@pytest.fixture
def coordinator() -> EffectCoordinator:
    return EffectCoordinator(InMemoryStateStore(ScreenState(("splash",))))


class TestRunChain:
    @pytest.mark.asyncio
    async def test_steps_run_in_order(self, coordinator: EffectCoordinator) -> None:
        sink: list[str] = []
        await coordinator.dispatch_and_await(
            Chain(
                ChainStep(Record("first", sink)),
                ChainStep(Record("second", sink)),
                ChainStep(Record("third", sink)),
            )
        )
        assert sink == ["first", "second", "third"]
        assert [o.effect_name for o in coordinator.history] == [
            "record",
            "record",
            "record",
            "test-chain",
        ]

    @pytest.mark.asyncio
    async def test_returns_outcomes_in_step_order(self, coordinator: EffectCoordinator) -> None:
        captured: list[list[str]] = []

        class Capture(Effect):
            __slots__ = ()
            name = "capture"

            async def run(self, context: EffectContext) -> None:
                outcomes = await run_chain(context, [ChainStep(Record("x", []))])
                captured.append([o.effect_name for o in outcomes])

        await coordinator.dispatch_and_await(Capture())
        assert captured == [["record"]]

    @pytest.mark.asyncio
    async def test_step_waits_for_its_predicate(self, coordinator: EffectCoordinator) -> None:
        sink: list[str] = []
        task = coordinator.dispatch(
            Chain(
                ChainStep(Record("before", sink)),
                ChainStep(Record("after-tab-bar", sink), predicate=_tab_bar_active),
            )
        )
        await settle()
        assert sink == ["before"]
        assert coordinator.waiter.pending_count == 1

        coordinator.store.update(lambda s: s.with_active_surfaces(("tab-bar",)))
        outcome = await task

        assert outcome.success
        assert sink == ["before", "after-tab-bar"]

    @pytest.mark.asyncio
    async def test_failure_aborts_remaining_steps(
        self,
        coordinator: EffectCoordinator,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        caplog.set_level(logging.INFO, logger="effects.chain.runner")
        sink: list[str] = []

        with pytest.raises(EffectFailure, match="falha no passo"):
            await coordinator.dispatch_and_await(
                Chain(
                    ChainStep(Record("first", sink)),
                    ChainStep(Broken()),
                    ChainStep(Record("never", sink)),
                )
            )

        assert sink == ["first"]
        aborted = [r for r in caplog.records if r.getMessage() == "effect_chain_aborted"]
        assert len(aborted) == 1
        assert aborted[0].step_index == 1
        assert aborted[0].remaining_steps == 1

    @pytest.mark.asyncio
    async def test_wait_timeout_aborts_chain(self, coordinator: EffectCoordinator) -> None:
        sink: list[str] = []
        with pytest.raises(WaitTimeoutError):
            await coordinator.dispatch_and_await(
                Chain(
                    ChainStep(Record("gated", sink), predicate=_tab_bar_active, timeout=0.01),
                    ChainStep(Record("never", sink)),
                )
            )
        assert sink == []

    @pytest.mark.asyncio
    async def test_cancelled_chain_does_not_continue(self, coordinator: EffectCoordinator) -> None:
        sink: list[str] = []
        task = coordinator.dispatch(
            Chain(ChainStep(Record("gated", sink), predicate=_tab_bar_active))
        )
        await settle()
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task

        coordinator.store.update(lambda s: s.with_active_surfaces(("tab-bar",)))
        await settle()
        assert sink == []
        assert coordinator.store.subscriber_count == 0
