"""
Módulo effects: núcleo de coordenação de efeitos.

Efeitos são unidades de comportamento reativo: leem o estado,
aplicam guards, opcionalmente esperam um predicado e despacham
novas transições de estado ou efeitos, em ordem determinística.

Estrutura:
    - types/: Descritores de efeito, resultados, contrato do store
    - surfaces/: Visão das superfícies ativas (SurfaceStack)
    - rules/: Guards de apresentação/dispensa de overlays
    - waiter/: Espera cooperativa por predicado (PredicateWaiter)
    - manager/: EffectCoordinator e contexto de execução
    - routing/: Roteamento de notificações por conjuntos de IDs
    - chain/: Cadeias ordenadas de passos (ChainStep, run_chain)
"""

from effects.chain import ChainEffect, ChainStep, run_chain
from effects.manager import EffectContext, EffectCoordinator, get_current_effect_name
from effects.routing import NotificationRouter, RoutingRule
from effects.rules import (
    GuardedPresentationPolicy,
    GuardResult,
    evaluate_dismissal,
    evaluate_presentation,
    should_dismiss,
    should_present,
)
from effects.surfaces import SurfaceStack
from effects.types import (
    Effect,
    EffectOutcome,
    Predicate,
    StateStoreProtocol,
    StateUpdater,
)
from effects.waiter import PredicateWaiter

__all__ = [
    # Chain
    "ChainEffect",
    "ChainStep",
    # Types
    "Effect",
    # Manager
    "EffectContext",
    "EffectCoordinator",
    "EffectOutcome",
    # Rules
    "GuardResult",
    "GuardedPresentationPolicy",
    # Routing
    "NotificationRouter",
    "Predicate",
    # Waiter
    "PredicateWaiter",
    "RoutingRule",
    "StateStoreProtocol",
    "StateUpdater",
    # Surfaces
    "SurfaceStack",
    "evaluate_dismissal",
    "evaluate_presentation",
    "get_current_effect_name",
    "run_chain",
    "should_dismiss",
    "should_present",
]
