"""Store de estado em memória.

Implementa o contrato do store com um `threading.Lock` como ponto
único de serialização: a transformação roda sob o lock e os listeners
são notificados depois, fora dele, na ordem de assinatura.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Generic, TypeVar

from effects.types.store import StateStoreProtocol

if TYPE_CHECKING:
    from collections.abc import Callable

    from effects.types.store import StateListener, Unsubscribe

logger = logging.getLogger(__name__)

S = TypeVar("S")


class _Subscription(Generic[S]):
    __slots__ = ("active", "listener")

    def __init__(self, listener: StateListener[S]) -> None:
        self.listener = listener
        self.active = True


class InMemoryStateStore(StateStoreProtocol[S]):
    """Store em memória; uma instância por processo/sessão (ou por teste)."""

    def __init__(self, initial_state: S) -> None:
        self._state = initial_state
        self._lock = threading.Lock()
        self._subscriptions: list[_Subscription[S]] = []

    def get_state(self) -> S:
        return self._state

    def update(self, transform: Callable[[S], S]) -> bool:
        """Aplica `transform` atomicamente; notifica somente se mudou."""
        with self._lock:
            previous = self._state
            current = transform(previous)
            if current == previous:
                return False
            self._state = current
            subscriptions = list(self._subscriptions)

        for subscription in subscriptions:
            # Pode ter sido cancelada por um listener anterior nesta entrega
            if not subscription.active:
                continue
            try:
                subscription.listener(current)
            except Exception:
                logger.exception("state_listener_failed")
        return True

    def subscribe(self, listener: StateListener[S]) -> Unsubscribe:
        subscription = _Subscription(listener)
        with self._lock:
            self._subscriptions.append(subscription)

        def _unsubscribe() -> None:
            with self._lock:
                if not subscription.active:
                    return
                subscription.active = False
                self._subscriptions.remove(subscription)

        return _unsubscribe

    @property
    def subscriber_count(self) -> int:
        return len(self._subscriptions)
