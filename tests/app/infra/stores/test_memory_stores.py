"""Testes do store de token em memória."""

from __future__ import annotations

from app.infra.stores.memory_stores import MemorySessionStore
from app.protocols import SessionStoreProtocol


class TestMemorySessionStore:
    """Testes do MemorySessionStore."""

    def test_empty_by_default(self) -> None:
        """Sem token inicialmente."""
        store = MemorySessionStore()
        assert store.get() is None
        assert store.has_session is False

    def test_store_and_get(self) -> None:
        """Guarda e devolve o token."""
        store = MemorySessionStore()
        store.store(b"hello-world")
        assert store.get() == b"hello-world"
        assert store.has_session is True

    def test_last_write_wins(self) -> None:
        """Nova escrita substitui a anterior."""
        store = MemorySessionStore()
        store.store(b"first")
        store.store(b"second")
        assert store.get() == b"second"

    def test_reset_removes_token(self) -> None:
        """reset remove o token."""
        store = MemorySessionStore()
        store.store(b"token")
        store.reset()
        assert store.get() is None

    def test_empty_token_is_a_session(self) -> None:
        """Token vazio ainda é um token armazenado."""
        store = MemorySessionStore()
        store.store(b"")
        assert store.get() == b""

    def test_instances_are_isolated(self) -> None:
        """Cada instância tem seu próprio estado."""
        first, second = MemorySessionStore(), MemorySessionStore()
        first.store(b"token")
        assert second.get() is None

    def test_satisfies_protocol(self) -> None:
        """Implementa SessionStoreProtocol."""
        assert isinstance(MemorySessionStore(), SessionStoreProtocol)
