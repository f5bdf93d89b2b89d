"""Settings da API remota de heróis.

Host, timeout e verificação TLS do backend consumido pelos use cases.
O esquema é sempre https.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

API_DEFAULT_HOST: str = "dragonball.keepcoding.education"
API_SCHEME: str = "https"
DEFAULT_REQUEST_TIMEOUT_SECONDS: float = 10.0


@dataclass(frozen=True)
class ApiSettings:
    """Configurações do backend de heróis.

    Attributes:
        host: Host do backend (sem esquema nem path)
        request_timeout_seconds: Timeout por requisição, sem retry
        verify_ssl: Verificação do certificado TLS
    """

    host: str = API_DEFAULT_HOST
    request_timeout_seconds: float = DEFAULT_REQUEST_TIMEOUT_SECONDS
    verify_ssl: bool = True

    @property
    def base_url(self) -> str:
        """URL base no formato https://{host}."""
        return f"{API_SCHEME}://{self.host}"

    def validate(self) -> list[str]:
        """Valida configurações da API.

        Returns:
            Lista de erros (vazia = OK).
        """
        errors: list[str] = []

        if not self.host:
            errors.append("API_HOST não pode ser vazio")
        elif "://" in self.host or "/" in self.host:
            errors.append(f"API_HOST deve conter apenas o host: {self.host}")

        if self.request_timeout_seconds <= 0:
            errors.append("API_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _load_api_from_env() -> ApiSettings:
    """Carrega ApiSettings de variáveis de ambiente."""
    return ApiSettings(
        host=os.getenv("API_HOST", API_DEFAULT_HOST).strip(),
        request_timeout_seconds=float(
            os.getenv("API_TIMEOUT_SECONDS", str(DEFAULT_REQUEST_TIMEOUT_SECONDS))
        ),
        verify_ssl=os.getenv("API_VERIFY_SSL", "true").lower() in ("true", "1", "yes"),
    )


@lru_cache(maxsize=1)
def get_api_settings() -> ApiSettings:
    """Retorna instância cacheada de ApiSettings."""
    return _load_api_from_env()
