"""
Exports públicos do módulo effects/rules.

Guards de apresentação/dispensa de overlays.
"""

from effects.rules.presentation import (
    GuardedPresentationPolicy,
    GuardResult,
    evaluate_dismissal,
    evaluate_presentation,
    should_dismiss,
    should_present,
)

__all__ = [
    "GuardResult",
    "GuardedPresentationPolicy",
    "evaluate_dismissal",
    "evaluate_presentation",
    "should_dismiss",
    "should_present",
]
