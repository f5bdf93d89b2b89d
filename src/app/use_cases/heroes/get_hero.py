"""Use case de busca de um herói por nome exato."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from utils.errors import DomainError

if TYPE_CHECKING:
    from app.domain.hero import Hero
    from app.protocols.use_cases import GetAllHeroesUseCaseProtocol

logger = logging.getLogger(__name__)

HERO_NOT_FOUND = "Hero not found"


class HeroNotFoundError(DomainError):
    """Nenhum herói com o nome exato informado."""

    def __init__(self, reason: str = HERO_NOT_FOUND) -> None:
        super().__init__(reason)


class GetHeroUseCase:
    """Delega a GetAllHeroes e faz busca linear por nome exato."""

    def __init__(self, get_all_heroes: GetAllHeroesUseCaseProtocol) -> None:
        self._get_all_heroes = get_all_heroes

    async def execute(self, hero_name: str) -> Hero:
        """Retorna o herói cujo nome é exatamente `hero_name`.

        Raises:
            HeroNotFoundError: Lista obtida, mas sem correspondência exata
            ApiErrorResponse | httpx.TransportError: Falha da listagem, sem alteração
        """
        heroes = await self._get_all_heroes.execute(hero_name)
        for hero in heroes:
            if hero.name == hero_name:
                return hero
        logger.info("hero_not_found", extra={"candidates": len(heroes)})
        raise HeroNotFoundError()
