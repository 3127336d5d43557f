"""Stores: implementações concretas do StateStoreProtocol."""

from __future__ import annotations

from app.infra.stores.memory_state_store import InMemoryStateStore

__all__ = ["InMemoryStateStore"]
