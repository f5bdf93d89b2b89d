"""Descritor do endpoint de transformações por herói."""

from __future__ import annotations

from pydantic import BaseModel

from api.networking.request import ApiRequest, HttpMethod, ResponseShape
from app.domain.transformation import Transformation
from config.settings.api import get_api_settings

# Path publicado pelo backend (grafia "tranformations" é a do servidor)
TRANSFORMATIONS_PATH = "/api/heros/tranformations"


class TransformationsFilter(BaseModel):
    """Body do POST: identificador do herói."""

    id: str = ""


def get_transformations_request(hero_id: str | None = None) -> ApiRequest[list[Transformation]]:
    """Monta o descritor POST /api/heros/tranformations com body {"id": ...}."""
    settings = get_api_settings()
    return ApiRequest(
        method=HttpMethod.POST,
        path=TRANSFORMATIONS_PATH,
        response_shape=ResponseShape.decode(list[Transformation]),
        host=settings.host,
        body=TransformationsFilter(id=hero_id or ""),
        timeout_seconds=settings.request_timeout_seconds,
    )
