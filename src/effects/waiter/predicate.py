"""
Espera cooperativa por predicado sobre o estado.

O efeito que chama `wait_for` é suspenso (sem bloquear o loop nem
outros efeitos) até que `predicate(estado)` seja verdadeiro:

1. checa imediatamente; se já for verdadeiro retorna sem assinar nada;
2. caso contrário assina o canal de mudanças do store e reavalia a
   cada notificação;
3. na primeira avaliação verdadeira cancela a assinatura e retoma
   exatamente uma vez.

Sem prazo por padrão: o uso típico é "esperar o app terminar o boot",
que sempre acontece enquanto o processo vive. Um `timeout` opcional
faz a espera falhar com WaitTimeoutError.

`cancel_all` descarta as esperas pendentes sem executar continuação.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any

from utils.errors import CoordinatorClosedError, EffectFailure, WaitTimeoutError

if TYPE_CHECKING:
    from effects.types.store import Predicate, StateStoreProtocol

logger = logging.getLogger(__name__)


class PredicateWaiter:
    """Registro de esperas independentes sobre um mesmo store."""

    __slots__ = ("_closed", "_pending", "_store")

    def __init__(self, store: StateStoreProtocol[Any]) -> None:
        self._store = store
        self._pending: set[asyncio.Future[None]] = set()
        self._closed = False

    @property
    def pending_count(self) -> int:
        """Quantidade de esperas suspensas no momento."""
        return len(self._pending)

    @property
    def is_closed(self) -> bool:
        return self._closed

    async def wait_for(
        self,
        predicate: Predicate[Any],
        timeout: float | None = None,
    ) -> None:
        """
        Suspende até o predicado ser verdadeiro.

        Args:
            predicate: Função pura do estado para bool
            timeout: Prazo em segundos (None = sem prazo)

        Raises:
            WaitTimeoutError: Prazo expirou antes do predicado
            EffectFailure: Predicado levantou exceção
            CoordinatorClosedError: Waiter já foi encerrado
            asyncio.CancelledError: Espera descartada por cancel_all
        """
        if self._closed:
            raise CoordinatorClosedError("waiter encerrado: espera recusada")

        if _evaluate(predicate, self._store.get_state()):
            return

        loop = asyncio.get_running_loop()
        future: asyncio.Future[None] = loop.create_future()

        def _resolve(state: Any) -> None:
            if future.done():
                return
            try:
                satisfied = _evaluate(predicate, state)
            except EffectFailure as exc:
                unsubscribe()
                future.set_exception(exc)
                return
            if satisfied:
                unsubscribe()
                future.set_result(None)

        def _on_change(state: Any) -> None:
            # O store notifica na thread que chamou update.
            try:
                loop.call_soon_threadsafe(_resolve, state)
            except RuntimeError:
                logger.debug("predicate_wait_loop_closed")

        unsubscribe = self._store.subscribe(_on_change)
        self._pending.add(future)
        logger.debug(
            "predicate_wait_suspended",
            extra={"pending_waits": len(self._pending), "timeout_seconds": timeout},
        )
        try:
            if timeout is None:
                await future
            else:
                await asyncio.wait_for(future, timeout)
        except TimeoutError as exc:
            raise WaitTimeoutError(
                f"predicado não satisfeito em {timeout}s"
            ) from exc
        finally:
            unsubscribe()
            self._pending.discard(future)

    def cancel_all(self) -> int:
        """
        Encerra o waiter e descarta todas as esperas pendentes.

        Returns:
            Quantidade de esperas canceladas
        """
        self._closed = True
        cancelled = 0
        for future in list(self._pending):
            if not future.done():
                future.cancel()
                cancelled += 1
        if cancelled:
            logger.info("predicate_waits_cancelled", extra={"cancelled_waits": cancelled})
        return cancelled


def _evaluate(predicate: Predicate[Any], state: Any) -> bool:
    try:
        return bool(predicate(state))
    except Exception as exc:
        raise EffectFailure(f"predicado falhou: {type(exc).__name__}") from exc
