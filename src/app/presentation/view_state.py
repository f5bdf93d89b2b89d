"""Estados de tela: Loading | Success | Error(reason).

Conjunto fechado e compartilhado por todos os view models. Cada novo
estado substitui o anterior por completo.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


@dataclass(frozen=True, slots=True)
class Loading:
    """Carregamento em andamento."""


@dataclass(frozen=True, slots=True)
class Success:
    """Dados carregados com sucesso."""


@dataclass(frozen=True, slots=True)
class Error:
    """Falha com motivo exibível no painel de erro."""

    reason: str


ViewState = Loading | Success | Error

LOADING = Loading()
SUCCESS = Success()


class SplashState(StrEnum):
    """Estados da tela de abertura."""

    LOADING = "LOADING"
    ERROR = "ERROR"
    READY = "READY"

    def __str__(self) -> str:
        return self.value
