"""Implementações concretas de stores."""

from app.infra.stores.memory_stores import MemorySessionStore

__all__ = [
    "MemorySessionStore",
]
