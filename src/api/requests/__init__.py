"""Descritores dos endpoints do backend de heróis."""

from api.requests.heroes import HEROES_PATH, HeroesFilter, get_heroes_request
from api.requests.login import LOGIN_PATH, get_login_request
from api.requests.transformations import (
    TRANSFORMATIONS_PATH,
    TransformationsFilter,
    get_transformations_request,
)

__all__ = [
    "HEROES_PATH",
    "LOGIN_PATH",
    "TRANSFORMATIONS_PATH",
    "HeroesFilter",
    "TransformationsFilter",
    "get_heroes_request",
    "get_login_request",
    "get_transformations_request",
]
