"""Exports públicos do módulo effects/routing."""

from effects.routing.router import EffectBuilder, NotificationRouter, RoutingRule

__all__ = [
    "EffectBuilder",
    "NotificationRouter",
    "RoutingRule",
]
