"""
Exports públicos do módulo effects/types.

Descritores de efeito, resultados e contrato do store.
"""

from effects.types.effect import Effect, StateUpdater
from effects.types.outcome import EffectOutcome
from effects.types.store import (
    Predicate,
    StateListener,
    StateStoreProtocol,
    Unsubscribe,
)

__all__ = [
    "Effect",
    "EffectOutcome",
    "Predicate",
    "StateListener",
    "StateStoreProtocol",
    "StateUpdater",
    "Unsubscribe",
]
