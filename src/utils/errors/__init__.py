"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    CoordinationError,
    CoordinatorClosedError,
    EffectFailure,
    PlatformUnavailableError,
    WaitTimeoutError,
)

__all__ = [
    "CoordinationError",
    "CoordinatorClosedError",
    "EffectFailure",
    "PlatformUnavailableError",
    "WaitTimeoutError",
]
