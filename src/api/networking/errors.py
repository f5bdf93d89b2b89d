"""Taxonomia de erros classificados da API de heróis.

Códigos negativos são sentinelas de falhas levantadas localmente;
códigos não negativos são status HTTP repassados.
"""

from __future__ import annotations

# Sentinelas das categorias locais
NETWORK_ERROR_CODE = -1
PARSE_DATA_ERROR_CODE = -2
UNKNOWN_ERROR_CODE = -3
EMPTY_RESPONSE_CODE = -4
MALFORMED_URL_CODE = -5


class ApiErrorResponse(Exception):
    """Erro classificado com URL, código, payload opcional e mensagem.

    Igualdade é estrutural sobre os quatro campos. `data` é apenas nomeado.
    """

    def __init__(
        self,
        url: str,
        status_code: int,
        message: str,
        *,
        data: bytes | None = None,
    ) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code
        self.data = data
        self.message = message

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"ApiErrorResponse(url={self.url!r}, status_code={self.status_code}, "
            f"message={self.message!r})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ApiErrorResponse):
            return NotImplemented
        return (self.url, self.status_code, self.data, self.message) == (
            other.url,
            other.status_code,
            other.data,
            other.message,
        )

    def __hash__(self) -> int:
        return hash((self.url, self.status_code, self.data, self.message))

    @property
    def is_http_status(self) -> bool:
        """True quando o código é um status HTTP repassado (>= 0)."""
        return self.status_code >= 0

    @classmethod
    def network(cls, url: str) -> ApiErrorResponse:
        """Resposta ausente ou com status diferente de 200."""
        return cls(url, NETWORK_ERROR_CODE, "Network connection error")

    @classmethod
    def parse_data(cls, url: str) -> ApiErrorResponse:
        """Bytes recebidos não correspondem ao formato declarado."""
        return cls(url, PARSE_DATA_ERROR_CODE, "Cannot Parse data")

    @classmethod
    def unknown(cls, url: str) -> ApiErrorResponse:
        return cls(url, UNKNOWN_ERROR_CODE, "Unknown error")

    @classmethod
    def empty(cls, url: str) -> ApiErrorResponse:
        return cls(url, EMPTY_RESPONSE_CODE, "Empty response")

    @classmethod
    def malformed_url(cls, url: str) -> ApiErrorResponse:
        """URL não pôde ser montada a partir de host/path."""
        return cls(url, MALFORMED_URL_CODE, "Can't generate the Url")
