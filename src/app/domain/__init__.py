"""Modelos de domínio do catálogo de heróis."""

from app.domain.credentials import Credentials
from app.domain.hero import Hero
from app.domain.transformation import Transformation

__all__ = [
    "Credentials",
    "Hero",
    "Transformation",
]
