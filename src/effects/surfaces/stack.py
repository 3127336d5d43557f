"""
Pilha de superfícies ativas.

Visão somente-leitura, derivada do estado, dos identificadores de
superfícies (telas/overlays) apresentadas no momento. A ordem segue a
apresentação: a superfície mais recente fica por último.

A visão nunca deve ser guardada através de um ponto de suspensão; é
sempre reconstruída a partir do estado corrente.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Protocol, Self


class SurfaceState(Protocol):
    """Estado que expõe a sequência ordenada de superfícies ativas."""

    @property
    def active_surfaces(self) -> tuple[str, ...]: ...

    def with_active_surfaces(self, surfaces: tuple[str, ...]) -> Self: ...


class SurfaceStack:
    """Sequência ordenada e imutável de superfícies ativas."""

    __slots__ = ("_identifiers",)

    def __init__(self, identifiers: Iterable[str] = ()) -> None:
        self._identifiers: tuple[str, ...] = tuple(identifiers)

    @classmethod
    def from_state(cls, state: SurfaceState) -> SurfaceStack:
        """Constrói a visão a partir de um snapshot de estado."""
        return cls(state.active_surfaces)

    @property
    def identifiers(self) -> tuple[str, ...]:
        """Identificadores na ordem de apresentação."""
        return self._identifiers

    @property
    def top(self) -> str | None:
        """Superfície apresentada mais recentemente (None se vazia)."""
        return self._identifiers[-1] if self._identifiers else None

    def contains(self, surface: str) -> bool:
        return surface in self._identifiers

    def contains_any(self, surfaces: Iterable[str]) -> bool:
        """True se ao menos uma das superfícies informadas estiver ativa."""
        return not set(self._identifiers).isdisjoint(surfaces)

    def pushed(self, surface: str) -> tuple[str, ...]:
        """Sequência resultante de apresentar `surface` (no-op se já ativa)."""
        if surface in self._identifiers:
            return self._identifiers
        return (*self._identifiers, surface)

    def removed(self, surface: str) -> tuple[str, ...]:
        """Sequência resultante de remover `surface` (no-op se ausente)."""
        return tuple(s for s in self._identifiers if s != surface)

    def __contains__(self, surface: object) -> bool:
        return surface in self._identifiers

    def __iter__(self) -> Iterator[str]:
        return iter(self._identifiers)

    def __len__(self) -> int:
        return len(self._identifiers)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SurfaceStack):
            return self._identifiers == other._identifiers
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._identifiers)

    def __repr__(self) -> str:
        return f"SurfaceStack({list(self._identifiers)!r})"
