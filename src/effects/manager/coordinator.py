"""
EffectCoordinator: sequenciamento e despacho de efeitos.

Garantias:
- `dispatch_and_await`: o efeito roda até o fim (sucesso ou falha)
  antes de o chamador prosseguir; falhas propagam como EffectFailure.
- `dispatch`: fire-and-forget; a falha é registrada em log e no
  histórico, nunca levantada no ponto de chamada.
- StateUpdater é aplicado pelo update atômico do store, que é o único
  ponto de serialização do estado.
- Cancelamento não é falha: é registrado e repropagado.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
import time
from collections import deque
from typing import TYPE_CHECKING, Any

from effects.manager.context import EffectContext, _current_effect
from effects.types.effect import StateUpdater
from effects.types.outcome import EffectOutcome
from effects.waiter.predicate import PredicateWaiter
from utils.errors import CoordinatorClosedError, EffectFailure

if TYPE_CHECKING:
    from collections.abc import Callable

    from effects.types.effect import Effect
    from effects.types.store import Predicate, StateStoreProtocol

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_SIZE = 256


class EffectCoordinator:
    """
    Coordena a execução de efeitos sobre um store de estado.

    Attributes:
        store: Store de estado (único recurso mutável compartilhado)
        dependencies: Colaboradores externos entregues aos efeitos
        history: Últimos resultados, em ordem de término
    """

    __slots__ = (
        "_active_tasks",
        "_closed",
        "_context",
        "_default_wait_timeout",
        "_dependencies",
        "_history",
        "_on_outcome",
        "_store",
        "_waiter",
    )

    def __init__(
        self,
        store: StateStoreProtocol[Any],
        dependencies: Any = None,
        *,
        waiter: PredicateWaiter | None = None,
        history_size: int = DEFAULT_HISTORY_SIZE,
        default_wait_timeout: float | None = None,
        on_outcome: Callable[[EffectOutcome], None] | None = None,
    ) -> None:
        """
        Inicializa o coordinator.

        Args:
            store: Store de estado
            dependencies: Colaboradores externos (plataforma, router...)
            waiter: PredicateWaiter (cria um sobre o store se None)
            history_size: Tamanho máximo do histórico de resultados
            default_wait_timeout: Prazo padrão das esperas (None = sem prazo)
            on_outcome: Callback chamado com cada resultado (métricas)
        """
        self._store = store
        self._dependencies = dependencies
        self._waiter = waiter or PredicateWaiter(store)
        self._history: deque[EffectOutcome] = deque(maxlen=history_size)
        self._default_wait_timeout = default_wait_timeout
        self._on_outcome = on_outcome
        self._active_tasks: set[asyncio.Task[EffectOutcome]] = set()
        self._context = EffectContext(self)
        self._closed = False

    @property
    def store(self) -> StateStoreProtocol[Any]:
        return self._store

    @property
    def state(self) -> Any:
        """Estado corrente do store."""
        return self._store.get_state()

    @property
    def dependencies(self) -> Any:
        return self._dependencies

    @property
    def waiter(self) -> PredicateWaiter:
        return self._waiter

    @property
    def history(self) -> list[EffectOutcome]:
        """Histórico de resultados (cópia para evitar mutação externa)."""
        return list(self._history)

    @property
    def active_task_count(self) -> int:
        """Efeitos fire-and-forget ainda em execução."""
        return len(self._active_tasks)

    @property
    def is_closed(self) -> bool:
        return self._closed

    def dispatch(
        self,
        effect: Effect,
        *,
        nested: bool = False,
    ) -> asyncio.Task[EffectOutcome]:
        """
        Despacha efeito sem aguardar (fire-and-forget).

        Deve ser chamado com um event loop em execução.

        Args:
            effect: Efeito a executar
            nested: True quando chamado de dentro de outro efeito

        Returns:
            Task cujo resultado é o EffectOutcome (nunca levanta EffectFailure)

        Raises:
            CoordinatorClosedError: Coordinator encerrado (apenas despachos externos)
        """
        self._ensure_open(effect, nested)
        task = asyncio.create_task(self._run_detached(effect), name=f"effect:{effect.name}")
        self._active_tasks.add(task)
        task.add_done_callback(self._on_task_done)
        logger.debug(
            "effect_scheduled",
            extra={"effect": effect.name, "active_tasks": len(self._active_tasks)},
        )
        return task

    async def dispatch_and_await(
        self,
        effect: Effect,
        *,
        nested: bool = False,
    ) -> EffectOutcome:
        """
        Despacha efeito e aguarda sua conclusão.

        Args:
            effect: Efeito a executar
            nested: True quando chamado de dentro de outro efeito

        Returns:
            EffectOutcome de sucesso

        Raises:
            EffectFailure: Falha do efeito (já registrada no histórico)
            CoordinatorClosedError: Coordinator encerrado (apenas despachos externos)
        """
        self._ensure_open(effect, nested)
        return await self._execute(effect)

    async def wait_for(
        self,
        predicate: Predicate[Any],
        timeout: float | None = None,
    ) -> None:
        """Suspende até o predicado ser verdadeiro (ver PredicateWaiter)."""
        effective_timeout = timeout if timeout is not None else self._default_wait_timeout
        await self._waiter.wait_for(predicate, timeout=effective_timeout)

    async def shutdown(self, timeout_seconds: float = 5.0) -> None:
        """
        Encerra o coordinator.

        Recusa novos despachos externos, descarta esperas pendentes sem
        retomá-las e aguarda (até `timeout_seconds`) os efeitos em voo;
        os que restarem são cancelados.
        """
        if self._closed:
            return
        self._closed = True
        cancelled_waits = self._waiter.cancel_all()

        # Efeitos drenados ainda podem despachar aninhados: drena até esvaziar.
        loop = asyncio.get_running_loop()
        deadline = loop.time() + timeout_seconds
        drained_tasks = 0
        cancelled_tasks = 0
        while self._active_tasks:
            in_flight = list(self._active_tasks)
            remaining = deadline - loop.time()
            if remaining > 0:
                done, _ = await asyncio.wait(in_flight, timeout=remaining)
                drained_tasks += len(done)
                continue
            for task in in_flight:
                task.cancel()
            await asyncio.gather(*in_flight, return_exceptions=True)
            cancelled_tasks += len(in_flight)

        logger.info(
            "effect_coordinator_shutdown",
            extra={
                "cancelled_waits": cancelled_waits,
                "drained_tasks": drained_tasks,
                "cancelled_tasks": cancelled_tasks,
            },
        )

    def _ensure_open(self, effect: Effect, nested: bool) -> None:
        if self._closed and not nested:
            raise CoordinatorClosedError(
                f"coordinator encerrado: despacho de {effect.name} recusado"
            )

    async def _execute(self, effect: Effect) -> EffectOutcome:
        token = _current_effect.set(effect.name)
        started_at = time.perf_counter()
        try:
            if isinstance(effect, StateUpdater):
                changed = self._store.update(effect.update_state)
                outcome = EffectOutcome.succeeded(
                    effect.name,
                    elapsed_ms=_elapsed_ms(started_at),
                    state_changed=changed,
                )
            else:
                await effect.run(self._context)
                outcome = EffectOutcome.succeeded(
                    effect.name,
                    elapsed_ms=_elapsed_ms(started_at),
                )
        except asyncio.CancelledError:
            logger.info("effect_cancelled", extra={"effect": effect.name})
            raise
        except EffectFailure as exc:
            if exc.effect_name is None:
                exc.effect_name = effect.name
            self._record(EffectOutcome.failed(effect.name, exc.reason, _elapsed_ms(started_at)))
            raise
        except Exception as exc:
            failure = EffectFailure(f"{type(exc).__name__}: {exc}", effect.name)
            self._record(
                EffectOutcome.failed(effect.name, failure.reason, _elapsed_ms(started_at))
            )
            raise failure from exc
        finally:
            _current_effect.reset(token)

        self._record(outcome)
        return outcome

    async def _run_detached(self, effect: Effect) -> EffectOutcome:
        try:
            return await self._execute(effect)
        except EffectFailure as exc:
            # Falha já registrada em _execute; não chega ao ponto de despacho
            return EffectOutcome.failed(effect.name, exc.reason)

    def _on_task_done(self, task: asyncio.Task[EffectOutcome]) -> None:
        self._active_tasks.discard(task)
        with contextlib.suppress(asyncio.CancelledError):
            exc = task.exception()
            if exc is not None:
                logger.error(
                    "effect_task_failed",
                    extra={
                        "task": task.get_name(),
                        "error_type": type(exc).__name__,
                        "active_tasks": len(self._active_tasks),
                    },
                )

    def _record(self, outcome: EffectOutcome) -> None:
        self._history.append(outcome)
        if outcome.success:
            logger.debug("effect_completed", extra=outcome.to_log_dict())
        else:
            logger.warning("effect_failed", extra=outcome.to_log_dict())
        if self._on_outcome is not None:
            try:
                self._on_outcome(outcome)
            except Exception:
                logger.exception("effect_outcome_listener_failed", extra={"effect": outcome.effect_name})


def _elapsed_ms(started_at: float) -> float:
    return (time.perf_counter() - started_at) * 1000
