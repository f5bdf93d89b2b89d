"""Configuração de logging estruturado.

Uso:
    from config.logging import configure_logging, get_logger

    configure_logging(level="INFO", service_name="dragonball-heroes")
    logger = get_logger(__name__)

Campos obrigatórios em todo log:
- service
- level
- logger
- message
- timestamp
"""

from config.logging.config import (
    DEFAULT_SERVICE_NAME,
    configure_logging,
    get_logger,
    payload_preview,
)
from config.logging.filters import ServiceContextFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "DEFAULT_SERVICE_NAME",
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "ServiceContextFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
    "payload_preview",
]
