"""View models por tela, cada um com seu StateBinding."""

from app.presentation.view_models.hero_detail import HERO_ID_NOT_FOUND, HeroDetailViewModel
from app.presentation.view_models.heroes_list import HeroesListViewModel
from app.presentation.view_models.login import LoginViewModel
from app.presentation.view_models.splash import SplashViewModel
from app.presentation.view_models.transformation_detail import (
    TRANSFORMATION_NOT_FOUND,
    TransformationDetailViewModel,
)
from app.presentation.view_models.transformations_list import TransformationsListViewModel

__all__ = [
    "HERO_ID_NOT_FOUND",
    "TRANSFORMATION_NOT_FOUND",
    "HeroDetailViewModel",
    "HeroesListViewModel",
    "LoginViewModel",
    "SplashViewModel",
    "TransformationDetailViewModel",
    "TransformationsListViewModel",
]
