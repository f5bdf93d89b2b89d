"""Núcleo de rede: descritores, interceptors, sessão e decodificação."""

from api.networking.errors import ApiErrorResponse
from api.networking.executor import decode_response, perform
from api.networking.interceptors import (
    AuthenticationRequestInterceptor,
    RequestInterceptor,
    apply_interceptors,
)
from api.networking.request import (
    DEFAULT_HEADERS,
    ApiRequest,
    HttpMethod,
    ResponseKind,
    ResponseShape,
)
from api.networking.session import ApiSession, HttpClientConfig

__all__ = [
    "DEFAULT_HEADERS",
    "ApiErrorResponse",
    "ApiRequest",
    "ApiSession",
    "AuthenticationRequestInterceptor",
    "HttpClientConfig",
    "HttpMethod",
    "RequestInterceptor",
    "ResponseKind",
    "ResponseShape",
    "apply_interceptors",
    "decode_response",
    "perform",
]
