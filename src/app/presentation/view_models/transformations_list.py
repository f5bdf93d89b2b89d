"""View model da lista de transformações de um herói."""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.presentation.binding import StateBinding
from app.presentation.sorting import sort_by_leading_number
from app.presentation.view_models._common import error_reason
from app.presentation.view_state import LOADING, SUCCESS, Error, ViewState

if TYPE_CHECKING:
    from app.domain.transformation import Transformation
    from app.protocols.use_cases import GetAllTransformationsUseCaseProtocol


class TransformationsListViewModel:
    """Carrega e ordena as transformações pelo número do nome."""

    def __init__(
        self,
        use_case: GetAllTransformationsUseCaseProtocol,
        hero_id: str,
        on_state_changed: StateBinding[ViewState] | None = None,
    ) -> None:
        self._use_case = use_case
        self.hero_id = hero_id
        self.on_state_changed: StateBinding[ViewState] = on_state_changed or StateBinding()
        self._transformations: list[Transformation] = []

    @property
    def transformations(self) -> list[Transformation]:
        return list(self._transformations)

    async def load(self) -> None:
        self.on_state_changed.update(LOADING)
        try:
            loaded = await self._use_case.execute(self.hero_id)
        except Exception as exc:
            self.on_state_changed.update(Error(error_reason(exc)))
            return
        self._transformations = sort_by_leading_number(loaded)
        self.on_state_changed.update(SUCCESS)
