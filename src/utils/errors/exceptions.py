"""Exceções de domínio compartilhadas pelos use cases."""

from __future__ import annotations


class DomainError(Exception):
    """Base para falhas de domínio com motivo legível pelo usuário.

    O motivo é exibido como está no painel de erro da tela.
    """

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason

    def __str__(self) -> str:
        return self.reason

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.reason == other.reason  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), self.reason))
