"""Descritor do endpoint de listagem de heróis."""

from __future__ import annotations

from pydantic import BaseModel

from api.networking.request import ApiRequest, HttpMethod, ResponseShape
from app.domain.hero import Hero
from config.settings.api import get_api_settings

HEROES_PATH = "/api/heros/all"


class HeroesFilter(BaseModel):
    """Body do POST: nome para filtrar (vazio = todos)."""

    name: str = ""


def get_heroes_request(name: str | None = None) -> ApiRequest[list[Hero]]:
    """Monta o descritor POST /api/heros/all com body {"name": ...}."""
    settings = get_api_settings()
    return ApiRequest(
        method=HttpMethod.POST,
        path=HEROES_PATH,
        response_shape=ResponseShape.decode(list[Hero]),
        host=settings.host,
        body=HeroesFilter(name=name or ""),
        timeout_seconds=settings.request_timeout_seconds,
    )
