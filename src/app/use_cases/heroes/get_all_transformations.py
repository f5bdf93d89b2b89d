"""Use case de listagem de transformações de um herói."""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.networking.executor import perform
from api.requests.transformations import get_transformations_request
from utils.errors import DomainError

if TYPE_CHECKING:
    from app.domain.transformation import Transformation
    from app.protocols.api_session import ApiSessionProtocol

TRANSFORMATION_NOT_FOUND = "Transformation not found"


class TransformationNotFoundError(DomainError):
    """Nenhuma transformação com o identificador pedido."""

    def __init__(self, reason: str = TRANSFORMATION_NOT_FOUND) -> None:
        super().__init__(reason)


class GetAllTransformationsUseCase:
    """Executa a listagem por id do herói; erros propagam sem alteração."""

    def __init__(self, api_session: ApiSessionProtocol) -> None:
        self._api_session = api_session

    async def execute(self, hero_id: str) -> list[Transformation]:
        return await perform(get_transformations_request(hero_id), self._api_session)


def find_transformation(
    transformations: list[Transformation],
    transformation_id: str,
) -> Transformation:
    """Seleciona a transformação pelo identificador.

    Raises:
        TransformationNotFoundError: Identificador ausente da lista
    """
    for transformation in transformations:
        if transformation.identifier == transformation_id:
            return transformation
    raise TransformationNotFoundError()
