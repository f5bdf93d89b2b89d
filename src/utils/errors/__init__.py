"""Exceções utilitárias compartilhadas."""

from .exceptions import DomainError

__all__ = [
    "DomainError",
]
