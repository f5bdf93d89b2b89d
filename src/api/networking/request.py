"""Descritor declarativo de requisições e montagem da requisição de wire.

Cada endpoint é um `ApiRequest` imutável (host, método, path, query,
headers, body e formato de resposta). `build()` transforma o descritor em
um `httpx.Request` pronto para despacho, sem efeitos colaterais:

1. URL `https://{host}{path}` com query string codificada (ordem por chave)
2. Host/path inválidos → `ApiErrorResponse.malformed_url(path)`
3. Body serializado em JSON apenas quando método != GET
4. Headers padrão JSON sobrescritos pelos headers do descritor
5. Timeout fixo por requisição (sem retry)
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any, Generic, TypeVar

import httpx
from pydantic import TypeAdapter
from pydantic_core import to_json

from api.networking.errors import ApiErrorResponse
from config.settings.api import API_DEFAULT_HOST, API_SCHEME, DEFAULT_REQUEST_TIMEOUT_SECONDS

ResponseT = TypeVar("ResponseT")

DEFAULT_HEADERS: Mapping[str, str] = {
    "Accept": "application/json",
    "Content-Type": "application/json",
}

# Rótulos DNS (letras, dígitos e hífen) separados por ponto, porta opcional
_HOST_PATTERN = re.compile(
    r"^(?=.{1,253}(?::\d{1,5})?$)"
    r"[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?"
    r"(?:\.[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?)*"
    r"(?::\d{1,5})?$"
)
_INVALID_PATH_CHARS = re.compile(r"[\s?#\x00-\x1f\x7f]")


class HttpMethod(StrEnum):
    """Métodos aceitos pelo descritor (UPDATE é não padrão, mas suportado)."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    UPDATE = "UPDATE"
    HEAD = "HEAD"
    PATCH = "PATCH"
    DELETE = "DELETE"
    OPTIONS = "OPTIONS"

    def __str__(self) -> str:
        return self.value


class ResponseKind(StrEnum):
    """Formato declarado da resposta de um endpoint."""

    DECODE = "decode"
    RAW_BYTES = "raw_bytes"
    NO_CONTENT = "no_content"


@dataclass(frozen=True, slots=True)
class ResponseShape(Generic[ResponseT]):
    """Formato de resposta associado a um descritor.

    Attributes:
        kind: decode tipado, bytes crus ou sem conteúdo
        adapter: TypeAdapter do tipo decodificado (apenas para DECODE)
    """

    kind: ResponseKind
    adapter: TypeAdapter[ResponseT] | None = None

    @classmethod
    def decode(cls, response_type: type[ResponseT] | Any) -> ResponseShape[ResponseT]:
        return cls(ResponseKind.DECODE, TypeAdapter(response_type))

    @classmethod
    def raw_bytes(cls) -> ResponseShape[bytes]:
        return cls(ResponseKind.RAW_BYTES)  # type: ignore[return-value]

    @classmethod
    def no_content(cls) -> ResponseShape[None]:
        return cls(ResponseKind.NO_CONTENT)  # type: ignore[return-value]


@dataclass(frozen=True)
class ApiRequest(Generic[ResponseT]):
    """Especificação declarativa de uma chamada de endpoint.

    Attributes:
        method: Método HTTP
        path: Path absoluto (ex: /api/heros/all), usado sem modificação
        response_shape: Formato esperado da resposta
        host: Host do backend
        headers: Headers específicos (vencem os padrão em colisão)
        query_parameters: Parâmetros de query
        body: Objeto serializável em JSON (ignorado em GET)
        timeout_seconds: Timeout da requisição
    """

    method: HttpMethod
    path: str
    response_shape: ResponseShape[ResponseT]
    host: str = API_DEFAULT_HOST
    headers: Mapping[str, str] = field(default_factory=dict)
    query_parameters: Mapping[str, str] = field(default_factory=dict)
    body: Any | None = None
    timeout_seconds: float = DEFAULT_REQUEST_TIMEOUT_SECONDS

    def build_url(self) -> httpx.URL:
        """Monta a URL final ou levanta malformed_url(path)."""
        if not _HOST_PATTERN.match(self.host or ""):
            raise ApiErrorResponse.malformed_url(self.path)
        if self.path and (not self.path.startswith("/") or _INVALID_PATH_CHARS.search(self.path)):
            raise ApiErrorResponse.malformed_url(self.path)

        hostname, _, port = self.host.partition(":")
        params = sorted((str(key), str(value)) for key, value in self.query_parameters.items())
        try:
            return httpx.URL(
                scheme=API_SCHEME,
                host=hostname,
                port=int(port) if port else None,
                path=self.path,
                params=params or None,
            )
        except (httpx.InvalidURL, ValueError) as exc:
            raise ApiErrorResponse.malformed_url(self.path) from exc

    def build_headers(self) -> httpx.Headers:
        """Headers padrão JSON sobrescritos pelos do descritor."""
        headers = httpx.Headers(DEFAULT_HEADERS)
        for key, value in self.headers.items():
            headers[key] = value
        return headers

    def encode_body(self) -> bytes | None:
        """Serializa o body em JSON; GET nunca carrega body.

        Falhas de serialização propagam como PydanticSerializationError.
        """
        if self.method is HttpMethod.GET or self.body is None:
            return None
        return to_json(self.body, by_alias=True)

    def build(self) -> httpx.Request:
        """Produz a requisição concreta pronta para despacho."""
        url = self.build_url()
        content = self.encode_body()
        timeout = httpx.Timeout(self.timeout_seconds)
        return httpx.Request(
            self.method.value,
            url,
            headers=self.build_headers(),
            content=content,
            extensions={"timeout": timeout.as_dict()},
        )
