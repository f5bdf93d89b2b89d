"""View model do detalhe de herói.

Fluxo encadeado: busca do herói por nome e, em seguida, das suas
transformações. Success só é emitido depois das duas cargas.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.presentation.binding import StateBinding
from app.presentation.view_models._common import error_reason
from app.presentation.view_state import LOADING, SUCCESS, Error, ViewState

if TYPE_CHECKING:
    from app.domain.hero import Hero
    from app.domain.transformation import Transformation
    from app.protocols.use_cases import (
        GetAllTransformationsUseCaseProtocol,
        GetHeroUseCaseProtocol,
    )

logger = logging.getLogger(__name__)

HERO_ID_NOT_FOUND = "Hero ID not found"


class HeroDetailViewModel:
    """Loading → Error(reason) | Success (após herói e transformações)."""

    def __init__(
        self,
        hero_name: str,
        hero_use_case: GetHeroUseCaseProtocol,
        transformation_use_case: GetAllTransformationsUseCaseProtocol,
        on_state_changed: StateBinding[ViewState] | None = None,
    ) -> None:
        self._hero_name = hero_name
        self._hero_use_case = hero_use_case
        self._transformation_use_case = transformation_use_case
        self.on_state_changed: StateBinding[ViewState] = on_state_changed or StateBinding()
        self.hero: Hero | None = None
        self.transformations: list[Transformation] | None = None

    @property
    def hero_name(self) -> str:
        return self._hero_name

    async def load(self) -> None:
        self.on_state_changed.update(LOADING)
        try:
            self.hero = await self._hero_use_case.execute(self._hero_name)
        except Exception as exc:
            self.on_state_changed.update(Error(error_reason(exc)))
            return
        await self._load_transformations()

    async def _load_transformations(self) -> None:
        if self.hero is None or not self.hero.identifier:
            self.on_state_changed.update(Error(HERO_ID_NOT_FOUND))
            return
        try:
            self.transformations = await self._transformation_use_case.execute(
                self.hero.identifier
            )
        except Exception as exc:
            self.on_state_changed.update(Error(error_reason(exc)))
            return
        logger.debug(
            "hero_detail_loaded",
            extra={"transformations": len(self.transformations)},
        )
        self.on_state_changed.update(SUCCESS)
