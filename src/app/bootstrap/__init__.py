"""Bootstrap da aplicação — inicialização e wiring.

Este módulo é o composition root: configura logging, valida settings e
mantém as instâncias compartilhadas do processo (store de token e sessão
HTTP), injetadas nos use cases pelas factories de `dependencies`.

Uso:
    from app.bootstrap import initialize_app, create_login_view_model

    initialize_app()
    view_model = create_login_view_model()
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import TYPE_CHECKING

from app.bootstrap.dependencies import (
    create_api_session,
    create_get_all_heroes_use_case,
    create_get_all_transformations_use_case,
    create_get_hero_use_case,
    create_hero_detail_view_model,
    create_heroes_list_view_model,
    create_login_use_case,
    create_login_view_model,
    create_session_store,
    create_splash_view_model,
    create_transformation_detail_view_model,
    create_transformations_list_view_model,
)
from config.logging import configure_logging
from config.settings import get_api_settings, get_base_settings

if TYPE_CHECKING:
    from api.networking.session import ApiSession
    from app.protocols.session_store import SessionStoreProtocol

STRICT_VALIDATION_ENVS = {"staging", "production"}

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Inicializa a aplicação: logging estruturado e validação de settings.

    Deve ser chamada uma vez no início do processo.
    """
    base = get_base_settings()
    configure_logging(
        level=base.effective_log_level,
        service_name=base.service_name,
        environment=base.environment,
    )
    validate_runtime_settings()


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` mantém alerta sem bloquear execução local.
    """
    base = get_base_settings()
    errors: list[str] = [f"base: {error}" for error in base.validate()]
    errors.extend(f"api: {error}" for error in get_api_settings().validate())

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": base.environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if base.environment in STRICT_VALIDATION_ENVS:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {base.environment}:\n{details}")


# ──────────────────────────────────────────────────────────────────────────────
# Instâncias compartilhadas (lazy initialization com cache)
# ──────────────────────────────────────────────────────────────────────────────


@lru_cache(maxsize=1)
def get_session_store() -> SessionStoreProtocol:
    """Store de token compartilhado por todo o processo."""
    return create_session_store()


@lru_cache(maxsize=1)
def get_api_session() -> ApiSession:
    """Sessão HTTP compartilhada, autenticada pelo store compartilhado."""
    return create_api_session(get_session_store())


def logout() -> None:
    """Remove o token compartilhado (próximas requisições sem Bearer)."""
    get_session_store().reset()
    logger.info("session_logged_out")


def reset_shared_instances() -> None:
    """Descarta as instâncias compartilhadas (usado entre testes)."""
    get_api_session.cache_clear()
    get_session_store.cache_clear()


__all__ = [
    "create_api_session",
    "create_get_all_heroes_use_case",
    "create_get_all_transformations_use_case",
    "create_get_hero_use_case",
    "create_hero_detail_view_model",
    "create_heroes_list_view_model",
    "create_login_use_case",
    "create_login_view_model",
    "create_session_store",
    "create_splash_view_model",
    "create_transformation_detail_view_model",
    "create_transformations_list_view_model",
    "get_api_session",
    "get_session_store",
    "initialize_app",
    "logout",
    "reset_shared_instances",
    "validate_runtime_settings",
]
