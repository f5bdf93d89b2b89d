"""Formatter JSON dos logs do cliente.

Todo record sai com: timestamp, level, logger, message, service.
Campos de `extra` (path, status_code, error_type...) são anexados como chaves.
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

REQUIRED_LOG_FIELDS = frozenset({"asctime", "levelname", "name", "message", "service"})

FIELD_RENAME_MAP = {
    "asctime": "timestamp",
    "levelname": "level",
    "name": "logger",
}

ISO_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"


def create_json_formatter() -> JsonFormatter:
    """Formatter JSON com campos renomeados e texto não ASCII preservado.

    Nomes como "1. Oozaru – Gran Mono" aparecem sem escape nos previews.
    """
    fields = " ".join(f"%({name})s" for name in sorted(REQUIRED_LOG_FIELDS))
    return JsonFormatter(
        fields,
        datefmt=ISO_DATE_FORMAT,
        rename_fields=FIELD_RENAME_MAP,
        json_ensure_ascii=False,
    )
