"""Exports públicos do módulo effects/chain."""

from effects.chain.runner import ChainEffect, ChainStep, run_chain

__all__ = [
    "ChainEffect",
    "ChainStep",
    "run_chain",
]
