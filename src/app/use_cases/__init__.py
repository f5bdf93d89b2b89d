"""Casos de uso: composição de descritor + sessão + store."""

from app.use_cases.auth import LoginUseCase, LoginUseCaseError
from app.use_cases.heroes import (
    HERO_NOT_FOUND,
    TRANSFORMATION_NOT_FOUND,
    GetAllHeroesUseCase,
    GetAllTransformationsUseCase,
    GetHeroUseCase,
    HeroNotFoundError,
    TransformationNotFoundError,
    find_transformation,
)

__all__ = [
    "HERO_NOT_FOUND",
    "TRANSFORMATION_NOT_FOUND",
    "GetAllHeroesUseCase",
    "GetAllTransformationsUseCase",
    "GetHeroUseCase",
    "HeroNotFoundError",
    "LoginUseCase",
    "LoginUseCaseError",
    "TransformationNotFoundError",
    "find_transformation",
]
