"""Protocolo da sessão HTTP usada pelos use cases.

Evita dependência direta da implementação httpx em api.networking.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from api.networking.request import ApiRequest


@runtime_checkable
class ApiSessionProtocol(Protocol):
    """Contrato mínimo: executar um descritor e devolver os bytes de resposta."""

    async def execute(self, api_request: ApiRequest[Any]) -> bytes: ...
