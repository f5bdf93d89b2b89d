"""Filters de logging para injeção de contexto.

Campos injetados:
- service: Nome do serviço (ex: dragonball-heroes)
- environment: Ambiente de execução
"""

from __future__ import annotations

import logging


class ServiceContextFilter(logging.Filter):
    """Injeta service e environment em cada record de log.

    Importante: nunca adicionar tokens, senhas ou headers Authorization.
    """

    def __init__(self, service_name: str, environment: str = "development") -> None:
        super().__init__()
        self._service_name = service_name
        self._environment = environment

    def filter(self, record: logging.LogRecord) -> bool:
        """Adiciona service e environment ao record.

        Valores passados explicitamente via `extra` são preservados.

        Returns:
            True sempre (não filtra, apenas enriquece).
        """
        if not getattr(record, "service", None):
            record.service = self._service_name
        if not getattr(record, "environment", None):
            record.environment = self._environment
        return True
