"""Configuração centralizada de logging.

Uso:
    from config.logging import configure_logging, get_logger

    # Na inicialização (app.bootstrap)
    configure_logging(level="INFO", service_name="dragonball-heroes")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("heroes_loaded", extra={"count": 42})
"""

from __future__ import annotations

import logging

from config.logging.filters import ServiceContextFilter
from config.logging.formatters import create_json_formatter
from config.settings.base import VALID_LOG_LEVELS

# Nome padrão do serviço
DEFAULT_SERVICE_NAME = "dragonball-heroes"

# Tamanho máximo de payload exibido em logs de diagnóstico
PAYLOAD_PREVIEW_LIMIT = 512


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    environment: str = "development",
) -> None:
    """Configura logging JSON estruturado para o cliente.

    Deve ser chamada uma vez na inicialização (app.bootstrap).

    Args:
        level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        service_name: Nome do serviço para identificação nos logs.
        environment: Ambiente de execução injetado em cada record.

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(ServiceContextFilter(service_name, environment))

    root = logging.getLogger()
    root.setLevel(level_upper)
    # Substituir handlers existentes para evitar duplicação
    root.handlers = [handler]


def get_logger(name: str) -> logging.Logger:
    """Retorna logger para o módulo especificado (geralmente __name__)."""
    return logging.getLogger(name)


def payload_preview(data: bytes | str | None, limit: int = PAYLOAD_PREVIEW_LIMIT) -> str:
    """Retorna prévia textual truncada de um payload para logs de diagnóstico.

    Bytes são decodificados como UTF-8 com substituição de caracteres inválidos.
    """
    if data is None:
        return ""
    text = data.decode("utf-8", errors="replace") if isinstance(data, bytes) else data
    if len(text) <= limit:
        return text
    return f"{text[:limit]}...(+{len(text) - limit} chars)"
