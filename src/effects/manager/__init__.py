"""
Exports públicos do módulo effects/manager.

Coordinator de efeitos e contexto de execução.
"""

from effects.manager.context import EffectContext, get_current_effect_name
from effects.manager.coordinator import DEFAULT_HISTORY_SIZE, EffectCoordinator

__all__ = [
    "DEFAULT_HISTORY_SIZE",
    "EffectContext",
    "EffectCoordinator",
    "get_current_effect_name",
]
