"""Exports públicos do módulo effects/waiter."""

from effects.waiter.predicate import PredicateWaiter

__all__ = [
    "PredicateWaiter",
]
