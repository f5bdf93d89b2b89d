"""View model da lista de heróis."""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.presentation.binding import StateBinding
from app.presentation.view_models._common import error_reason
from app.presentation.view_state import LOADING, SUCCESS, Error, ViewState

if TYPE_CHECKING:
    from app.domain.hero import Hero
    from app.protocols.use_cases import GetAllHeroesUseCaseProtocol


class HeroesListViewModel:
    """Carrega todos os heróis; cada `load` reinicia em Loading."""

    def __init__(
        self,
        use_case: GetAllHeroesUseCaseProtocol,
        on_state_changed: StateBinding[ViewState] | None = None,
    ) -> None:
        self._use_case = use_case
        self.on_state_changed: StateBinding[ViewState] = on_state_changed or StateBinding()
        self._heroes: list[Hero] = []

    @property
    def heroes(self) -> list[Hero]:
        return list(self._heroes)

    async def load(self) -> None:
        self.on_state_changed.update(LOADING)
        try:
            self._heroes = await self._use_case.execute()
        except Exception as exc:
            self.on_state_changed.update(Error(error_reason(exc)))
            return
        self.on_state_changed.update(SUCCESS)
