"""Use cases do catálogo de heróis."""

from app.use_cases.heroes.get_all_heroes import GetAllHeroesUseCase
from app.use_cases.heroes.get_all_transformations import (
    TRANSFORMATION_NOT_FOUND,
    GetAllTransformationsUseCase,
    TransformationNotFoundError,
    find_transformation,
)
from app.use_cases.heroes.get_hero import HERO_NOT_FOUND, GetHeroUseCase, HeroNotFoundError

__all__ = [
    "HERO_NOT_FOUND",
    "TRANSFORMATION_NOT_FOUND",
    "GetAllHeroesUseCase",
    "GetAllTransformationsUseCase",
    "GetHeroUseCase",
    "HeroNotFoundError",
    "TransformationNotFoundError",
    "find_transformation",
]
