"""Contratos dos use cases consumidos pela camada de apresentação."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.domain import Credentials, Hero, Transformation


class LoginUseCaseProtocol(Protocol):
    """Autentica e guarda o token; levanta LoginUseCaseError em falha."""

    async def execute(self, credentials: Credentials) -> None: ...


class GetAllHeroesUseCaseProtocol(Protocol):
    """Lista heróis (nome vazio = sem filtro)."""

    async def execute(self, name: str = "") -> list[Hero]: ...


class GetAllTransformationsUseCaseProtocol(Protocol):
    """Lista transformações de um herói pelo identificador."""

    async def execute(self, hero_id: str) -> list[Transformation]: ...


class GetHeroUseCaseProtocol(Protocol):
    """Busca um herói por nome exato; levanta HeroNotFoundError se ausente."""

    async def execute(self, hero_name: str) -> Hero: ...
