"""Camada de execução: despacha o descritor e decodifica a resposta.

- NO_CONTENT: sucesso com None, bytes ignorados
- RAW_BYTES: bytes inalterados
- DECODE: validação pydantic no tipo declarado; falha vira
  `ApiErrorResponse.parse_data(path)` encadeada ao ValidationError
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, TypeVar, cast

from pydantic import ValidationError

from api.networking.errors import ApiErrorResponse
from api.networking.request import ResponseKind
from config.logging import payload_preview

if TYPE_CHECKING:
    from api.networking.request import ApiRequest, ResponseShape
    from app.protocols.api_session import ApiSessionProtocol

logger = logging.getLogger(__name__)

ResponseT = TypeVar("ResponseT")


def decode_response(
    data: bytes,
    shape: ResponseShape[ResponseT],
    path: str,
) -> ResponseT:
    """Converte os bytes recebidos no formato declarado pelo endpoint."""
    if shape.kind is ResponseKind.NO_CONTENT:
        return cast(ResponseT, None)
    if shape.kind is ResponseKind.RAW_BYTES:
        return cast(ResponseT, data)

    if shape.adapter is None:
        raise ApiErrorResponse.unknown(path)
    try:
        decoded = shape.adapter.validate_json(data)
    except ValidationError as exc:
        logger.warning(
            "api_response_decode_failed",
            extra={"path": path, "error_count": exc.error_count()},
        )
        raise ApiErrorResponse.parse_data(path) from exc

    logger.debug(
        "api_response_decoded",
        extra={"path": path, "decoded": payload_preview(repr(decoded))},
    )
    return decoded


async def perform(
    api_request: ApiRequest[ResponseT],
    session: ApiSessionProtocol,
) -> ResponseT:
    """Executa o descritor na sessão e retorna a resposta tipada.

    Raises:
        ApiErrorResponse: Erros classificados (URL, status, decode)
        httpx.TransportError: Falha de transporte repassada pela sessão
    """
    data = await session.execute(api_request)
    logger.debug(
        "api_response_received",
        extra={"path": api_request.path, "payload": payload_preview(data)},
    )
    return decode_response(data, api_request.response_shape, api_request.path)
