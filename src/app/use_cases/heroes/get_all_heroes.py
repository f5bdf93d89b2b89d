"""Use case de listagem de heróis."""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.networking.executor import perform
from api.requests.heroes import get_heroes_request

if TYPE_CHECKING:
    from app.domain.hero import Hero
    from app.protocols.api_session import ApiSessionProtocol


class GetAllHeroesUseCase:
    """Executa a listagem; erros propagam sem alteração."""

    def __init__(self, api_session: ApiSessionProtocol) -> None:
        self._api_session = api_session

    async def execute(self, name: str = "") -> list[Hero]:
        """Retorna os heróis (filtrados por nome quando informado)."""
        return await perform(get_heroes_request(name), self._api_session)
