"""Descritor do endpoint de login (Basic auth, resposta = token cru)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.networking.request import ApiRequest, HttpMethod, ResponseShape
from config.settings.api import get_api_settings

if TYPE_CHECKING:
    from app.domain.credentials import Credentials

LOGIN_PATH = "/api/auth/login"


def get_login_request(credentials: Credentials) -> ApiRequest[bytes]:
    """Monta o descritor POST /api/auth/login com `Authorization: Basic ...`."""
    settings = get_api_settings()
    return ApiRequest(
        method=HttpMethod.POST,
        path=LOGIN_PATH,
        response_shape=ResponseShape.raw_bytes(),
        host=settings.host,
        headers={"Authorization": f"Basic {credentials.basic_auth_token()}"},
        timeout_seconds=settings.request_timeout_seconds,
    )
