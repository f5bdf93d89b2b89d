"""Agregador de settings do cliente Dragon Ball.

Re-exporta todas as settings e funções de cada módulo.
"""

from __future__ import annotations

from config.settings.api import (
    API_DEFAULT_HOST,
    API_SCHEME,
    DEFAULT_REQUEST_TIMEOUT_SECONDS,
    ApiSettings,
    get_api_settings,
)
from config.settings.base import (
    VALID_LOG_LEVELS,
    BaseSettings,
    Environment,
    get_base_settings,
)

__all__ = [
    # Constants
    "API_DEFAULT_HOST",
    "API_SCHEME",
    "DEFAULT_REQUEST_TIMEOUT_SECONDS",
    "VALID_LOG_LEVELS",
    # Settings
    "ApiSettings",
    "BaseSettings",
    "Environment",
    "get_api_settings",
    "get_base_settings",
]
