"""Factories de dependências — criação de implementações concretas.

Cada factory recebe colaboradores opcionais; sem eles, usa as instâncias
compartilhadas do processo (`get_session_store`, `get_api_session`).
Testes injetam instâncias isoladas.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.networking.interceptors import AuthenticationRequestInterceptor
from api.networking.session import ApiSession, HttpClientConfig
from app.infra.stores import MemorySessionStore
from app.presentation.view_models import (
    HeroDetailViewModel,
    HeroesListViewModel,
    LoginViewModel,
    SplashViewModel,
    TransformationDetailViewModel,
    TransformationsListViewModel,
)
from app.presentation.view_models.splash import DEFAULT_SPLASH_DELAY_SECONDS
from app.use_cases import (
    GetAllHeroesUseCase,
    GetAllTransformationsUseCase,
    GetHeroUseCase,
    LoginUseCase,
)
from config.settings import get_api_settings

if TYPE_CHECKING:
    import httpx

    from app.protocols.api_session import ApiSessionProtocol
    from app.protocols.session_store import SessionStoreProtocol

logger = logging.getLogger(__name__)


# ──────────────────────────────────────────────────────────────────────────────
# Infra
# ──────────────────────────────────────────────────────────────────────────────


def create_session_store() -> SessionStoreProtocol:
    """Cria store de token em memória."""
    return MemorySessionStore()


def create_api_session(
    session_store: SessionStoreProtocol,
    transport: httpx.AsyncBaseTransport | None = None,
) -> ApiSession:
    """Cria sessão HTTP com a cadeia padrão (autenticação Bearer)."""
    settings = get_api_settings()
    logger.debug("api_session_created", extra={"host": settings.host})
    return ApiSession(
        interceptors=[AuthenticationRequestInterceptor(session_store)],
        config=HttpClientConfig(verify_ssl=settings.verify_ssl),
        transport=transport,
    )


# ──────────────────────────────────────────────────────────────────────────────
# Use cases
# ──────────────────────────────────────────────────────────────────────────────


def _resolve_session(api_session: ApiSessionProtocol | None) -> ApiSessionProtocol:
    if api_session is not None:
        return api_session
    from app.bootstrap import get_api_session

    return get_api_session()


def _resolve_store(session_store: SessionStoreProtocol | None) -> SessionStoreProtocol:
    if session_store is not None:
        return session_store
    from app.bootstrap import get_session_store

    return get_session_store()


def create_login_use_case(
    api_session: ApiSessionProtocol | None = None,
    session_store: SessionStoreProtocol | None = None,
) -> LoginUseCase:
    return LoginUseCase(
        api_session=_resolve_session(api_session),
        session_store=_resolve_store(session_store),
    )


def create_get_all_heroes_use_case(
    api_session: ApiSessionProtocol | None = None,
) -> GetAllHeroesUseCase:
    return GetAllHeroesUseCase(_resolve_session(api_session))


def create_get_all_transformations_use_case(
    api_session: ApiSessionProtocol | None = None,
) -> GetAllTransformationsUseCase:
    return GetAllTransformationsUseCase(_resolve_session(api_session))


def create_get_hero_use_case(
    api_session: ApiSessionProtocol | None = None,
) -> GetHeroUseCase:
    return GetHeroUseCase(create_get_all_heroes_use_case(api_session))


# ──────────────────────────────────────────────────────────────────────────────
# View models (uma factory por tela)
# ──────────────────────────────────────────────────────────────────────────────


def create_login_view_model(
    api_session: ApiSessionProtocol | None = None,
    session_store: SessionStoreProtocol | None = None,
) -> LoginViewModel:
    return LoginViewModel(create_login_use_case(api_session, session_store))


def create_heroes_list_view_model(
    api_session: ApiSessionProtocol | None = None,
) -> HeroesListViewModel:
    return HeroesListViewModel(create_get_all_heroes_use_case(api_session))


def create_hero_detail_view_model(
    hero_name: str,
    api_session: ApiSessionProtocol | None = None,
) -> HeroDetailViewModel:
    return HeroDetailViewModel(
        hero_name=hero_name,
        hero_use_case=create_get_hero_use_case(api_session),
        transformation_use_case=create_get_all_transformations_use_case(api_session),
    )


def create_transformations_list_view_model(
    hero_id: str,
    api_session: ApiSessionProtocol | None = None,
) -> TransformationsListViewModel:
    return TransformationsListViewModel(
        use_case=create_get_all_transformations_use_case(api_session),
        hero_id=hero_id,
    )


def create_transformation_detail_view_model(
    hero_id: str,
    transformation_id: str,
    api_session: ApiSessionProtocol | None = None,
) -> TransformationDetailViewModel:
    return TransformationDetailViewModel(
        hero_id=hero_id,
        transformation_id=transformation_id,
        use_case=create_get_all_transformations_use_case(api_session),
    )


def create_splash_view_model(
    delay_seconds: float = DEFAULT_SPLASH_DELAY_SECONDS,
) -> SplashViewModel:
    return SplashViewModel(delay_seconds=delay_seconds)
