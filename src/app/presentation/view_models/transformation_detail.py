"""View model do detalhe de uma transformação."""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.presentation.binding import StateBinding
from app.presentation.view_models._common import error_reason
from app.presentation.view_state import LOADING, SUCCESS, Error, ViewState
from app.use_cases.heroes.get_all_transformations import (
    TRANSFORMATION_NOT_FOUND,
    TransformationNotFoundError,
    find_transformation,
)

if TYPE_CHECKING:
    from app.domain.transformation import Transformation
    from app.protocols.use_cases import GetAllTransformationsUseCaseProtocol


class TransformationDetailViewModel:
    """Carrega as transformações do herói e seleciona uma pelo identificador."""

    def __init__(
        self,
        hero_id: str,
        transformation_id: str,
        use_case: GetAllTransformationsUseCaseProtocol,
        on_state_changed: StateBinding[ViewState] | None = None,
    ) -> None:
        self._hero_id = hero_id
        self._transformation_id = transformation_id
        self._use_case = use_case
        self.on_state_changed: StateBinding[ViewState] = on_state_changed or StateBinding()
        self.transformations: list[Transformation] | None = None
        self.transformation: Transformation | None = None

    async def load(self) -> None:
        self.on_state_changed.update(LOADING)
        try:
            self.transformations = await self._use_case.execute(self._hero_id)
            self.transformation = find_transformation(
                self.transformations, self._transformation_id
            )
        except TransformationNotFoundError as exc:
            self.on_state_changed.update(Error(exc.reason))
            return
        except Exception as exc:
            self.on_state_changed.update(Error(error_reason(exc)))
            return
        self.on_state_changed.update(SUCCESS)
