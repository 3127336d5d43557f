"""Contrato do store de estado (colaborador externo)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Generic, TypeVar

S = TypeVar("S")

Predicate = Callable[[S], bool]
StateListener = Callable[[S], None]
Unsubscribe = Callable[[], None]


class StateStoreProtocol(ABC, Generic[S]):
    """
    Store de estado com leitura síncrona, update atômico e notificação.

    Toda mutação passa por `update`, que é o único ponto de serialização
    do estado compartilhado.
    """

    @abstractmethod
    def get_state(self) -> S:
        """Retorna o estado atual (snapshot imutável)."""

    @abstractmethod
    def update(self, transform: Callable[[S], S]) -> bool:
        """Aplica `transform` atomicamente.

        Notifica os listeners com o novo estado somente se ele for
        diferente do anterior.

        Returns:
            True se o estado mudou
        """

    @abstractmethod
    def subscribe(self, listener: StateListener[S]) -> Unsubscribe:
        """Registra listener de mudança; retorna unsubscribe idempotente."""

    @property
    @abstractmethod
    def subscriber_count(self) -> int:
        """Quantidade de listeners ativos."""
