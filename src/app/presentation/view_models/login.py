"""View model da tela de login."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.domain.credentials import Credentials
from app.presentation.binding import StateBinding
from app.presentation.view_models._common import GENERIC_ERROR_REASON
from app.presentation.view_state import LOADING, SUCCESS, Error, ViewState
from app.use_cases.auth.login import LoginUseCaseError

if TYPE_CHECKING:
    from app.protocols.use_cases import LoginUseCaseProtocol

logger = logging.getLogger(__name__)


class LoginViewModel:
    """Loading → Success | Error(reason) a cada `sign_in`."""

    def __init__(
        self,
        use_case: LoginUseCaseProtocol,
        on_state_changed: StateBinding[ViewState] | None = None,
    ) -> None:
        self._use_case = use_case
        self.on_state_changed: StateBinding[ViewState] = on_state_changed or StateBinding()

    async def sign_in(self, username: str | None, password: str | None) -> None:
        """Tenta autenticar; campos None são tratados como vazios."""
        self.on_state_changed.update(LOADING)
        credentials = Credentials(username=username or "", password=password or "")
        try:
            await self._use_case.execute(credentials)
        except LoginUseCaseError as exc:
            self.on_state_changed.update(Error(exc.reason))
        except Exception:
            logger.exception("sign_in_unexpected_error")
            self.on_state_changed.update(Error(GENERIC_ERROR_REASON))
        else:
            self.on_state_changed.update(SUCCESS)
