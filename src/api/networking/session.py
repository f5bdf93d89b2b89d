"""Sessão HTTP que despacha descritores e classifica o resultado.

Fluxo de `execute`:
1. `request.build()` (erros de montagem propagam sem wrapper)
2. Cadeia de interceptors sobre a requisição mutável
3. Um único despacho via httpx, sem retry
4. Falha de transporte (conexão, timeout, DNS, TLS) propaga sem classificação
5. Status != 200 → `ApiErrorResponse.network(path)` (3xx/4xx/5xx colapsados)
6. Status == 200 → bytes recebidos (b"" quando vazio)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import httpx

from api.networking.errors import ApiErrorResponse
from api.networking.interceptors import apply_interceptors

if TYPE_CHECKING:
    from collections.abc import Sequence

    from api.networking.interceptors import RequestInterceptor
    from api.networking.request import ApiRequest

logger = logging.getLogger(__name__)

SUCCESS_STATUS_CODE = 200


@dataclass(frozen=True)
class HttpClientConfig:
    """Configuração do cliente HTTP."""

    verify_ssl: bool = True
    follow_redirects: bool = False


class ApiSession:
    """Executa descritores `ApiRequest` e devolve os bytes da resposta."""

    def __init__(
        self,
        interceptors: Sequence[RequestInterceptor] | None = None,
        config: HttpClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Inicializa a sessão.

        Args:
            interceptors: Cadeia aplicada em ordem antes de cada despacho
            config: Configuração HTTP base
            transport: Transport httpx alternativo (ex: MockTransport em testes)
        """
        self._interceptors = tuple(interceptors or ())
        self._config = config or HttpClientConfig()
        self._transport = transport

    @property
    def interceptors(self) -> tuple[RequestInterceptor, ...]:
        return self._interceptors

    async def execute(self, api_request: ApiRequest[Any]) -> bytes:
        """Despacha o descritor e retorna os bytes de uma resposta 200.

        Raises:
            ApiErrorResponse: malformed_url na montagem ou network para status != 200
            httpx.TransportError: Falha de transporte, sem classificação
        """
        request = api_request.build()
        apply_interceptors(request, self._interceptors)

        logger.debug(
            "api_request_dispatched",
            extra={"method": request.method, "path": api_request.path},
        )
        response = await self._send(request, api_request.path)

        if response.status_code != SUCCESS_STATUS_CODE:
            logger.warning(
                "api_response_rejected",
                extra={"path": api_request.path, "status_code": response.status_code},
            )
            raise ApiErrorResponse.network(api_request.path)

        return response.content or b""

    async def _send(self, request: httpx.Request, path: str) -> httpx.Response:
        try:
            async with httpx.AsyncClient(
                transport=self._transport,
                verify=self._config.verify_ssl,
                follow_redirects=self._config.follow_redirects,
            ) as client:
                return await client.send(request)
        except httpx.TransportError as exc:
            logger.warning(
                "api_request_failed",
                extra={"path": path, "error_type": type(exc).__name__},
            )
            raise
