"""Exports públicos do módulo effects/surfaces."""

from effects.surfaces.stack import SurfaceStack, SurfaceState

__all__ = [
    "SurfaceStack",
    "SurfaceState",
]
