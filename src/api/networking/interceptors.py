"""Interceptors aplicados à requisição imediatamente antes do despacho.

Cada interceptor recebe acesso mutável ao `httpx.Request` e roda de forma
síncrona, na ordem da lista. Interceptors não abortam a cadeia.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterable

    import httpx

    from app.protocols.session_store import SessionStoreProtocol

logger = logging.getLogger(__name__)

AUTHORIZATION_HEADER = "Authorization"


@runtime_checkable
class RequestInterceptor(Protocol):
    """Contrato de transformação de requisição antes do despacho."""

    def intercept(self, request: httpx.Request) -> None: ...


class AuthenticationRequestInterceptor:
    """Injeta `Authorization: Bearer <token>` a partir do SessionStore.

    Sem token armazenado, a requisição segue sem alteração.
    """

    def __init__(self, session_store: SessionStoreProtocol) -> None:
        self._session_store = session_store

    def intercept(self, request: httpx.Request) -> None:
        token = self._session_store.get()
        if token is None:
            return
        text = token.decode("utf-8", errors="replace")
        request.headers[AUTHORIZATION_HEADER] = f"Bearer {text}"
        logger.debug("auth_header_injected", extra={"path": request.url.path})


def apply_interceptors(
    request: httpx.Request,
    interceptors: Iterable[RequestInterceptor],
) -> httpx.Request:
    """Aplica interceptors em ordem sobre a mesma requisição."""
    for interceptor in interceptors:
        interceptor.intercept(request)
    return request
