"""Use case de login: valida credenciais, autentica e guarda o token."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.networking.executor import perform
from api.requests.login import get_login_request
from utils.errors import DomainError

if TYPE_CHECKING:
    from app.domain.credentials import Credentials
    from app.protocols.api_session import ApiSessionProtocol
    from app.protocols.session_store import SessionStoreProtocol

logger = logging.getLogger(__name__)

INVALID_USERNAME = "Invalid username"
INVALID_PASSWORD = "Invalid password"
NETWORK_FAILED = "Network failed"

MIN_PASSWORD_LENGTH = 4


class LoginUseCaseError(DomainError):
    """Falha de login com motivo exibível."""


class LoginUseCase:
    """Orquestra validação, requisição de login e armazenamento do token."""

    def __init__(
        self,
        api_session: ApiSessionProtocol,
        session_store: SessionStoreProtocol,
    ) -> None:
        self._api_session = api_session
        self._session_store = session_store

    async def execute(self, credentials: Credentials) -> None:
        """Autentica e guarda os bytes retornados como token.

        Validação ocorre antes de qualquer IO: usuário primeiro, senha depois.
        Qualquer falha de execução vira "Network failed" (detalhe descartado).

        Raises:
            LoginUseCaseError: Credenciais inválidas ou falha de rede
        """
        if not validate_username(credentials.username):
            raise LoginUseCaseError(INVALID_USERNAME)
        if not validate_password(credentials.password):
            raise LoginUseCaseError(INVALID_PASSWORD)

        try:
            token = await perform(get_login_request(credentials), self._api_session)
        except Exception as exc:
            logger.info("login_failed", extra={"error_type": type(exc).__name__})
            raise LoginUseCaseError(NETWORK_FAILED) from exc

        self._session_store.store(token)
        logger.info("login_succeeded")


def validate_username(username: str) -> bool:
    """Usuário precisa ser não vazio e conter '@'."""
    return bool(username) and "@" in username


def validate_password(password: str) -> bool:
    """Senha precisa ter ao menos 4 caracteres."""
    return len(password) >= MIN_PASSWORD_LENGTH
