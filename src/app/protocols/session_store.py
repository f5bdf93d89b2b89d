"""Protocolo de armazenamento do token de sessão."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class SessionStoreProtocol(Protocol):
    """Contrato mínimo para guardar o token de autenticação.

    O token é opaco (bytes); sem expiração automática.
    """

    def store(self, token: bytes) -> None: ...

    def get(self) -> bytes | None: ...

    def reset(self) -> None: ...
