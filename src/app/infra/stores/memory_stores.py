"""Store de token de sessão em memória do processo.

Sem persistência entre reinícios. Cada instância tem estado próprio; o
compartilhamento por todo o processo vem da instância única criada em
`app.bootstrap.get_session_store()` e injetada nos colaboradores.
"""

from __future__ import annotations

import logging

from app.protocols.session_store import SessionStoreProtocol

logger = logging.getLogger(__name__)


class MemorySessionStore(SessionStoreProtocol):
    """Guarda o token atual; escrita é last-write-wins, sem lock."""

    def __init__(self) -> None:
        self._token: bytes | None = None

    def store(self, token: bytes) -> None:
        """Substitui o token atual."""
        self._token = bytes(token)
        logger.debug("session_token_stored", extra={"token_length": len(self._token)})

    def get(self) -> bytes | None:
        """Retorna o token atual ou None se ausente."""
        return self._token

    def reset(self) -> None:
        """Remove o token atual."""
        self._token = None
        logger.debug("session_token_reset")

    @property
    def has_session(self) -> bool:
        return self._token is not None
