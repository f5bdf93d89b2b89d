"""Helpers compartilhados pelos view models."""

from __future__ import annotations

GENERIC_ERROR_REASON = "Something has happened"


def error_reason(exc: BaseException) -> str:
    """Texto exibível de uma exceção (mensagem ou nome do tipo)."""
    return str(exc) or type(exc).__name__
