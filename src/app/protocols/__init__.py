"""Protocolos e contratos do core da aplicação."""

from .api_session import ApiSessionProtocol
from .session_store import SessionStoreProtocol
from .use_cases import (
    GetAllHeroesUseCaseProtocol,
    GetAllTransformationsUseCaseProtocol,
    GetHeroUseCaseProtocol,
    LoginUseCaseProtocol,
)

__all__ = [
    "ApiSessionProtocol",
    "GetAllHeroesUseCaseProtocol",
    "GetAllTransformationsUseCaseProtocol",
    "GetHeroUseCaseProtocol",
    "LoginUseCaseProtocol",
    "SessionStoreProtocol",
]
