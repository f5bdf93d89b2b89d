"""Hero - item do catálogo retornado por /api/heros/all.

No wire o identificador usa a chave "id"; os demais campos são diretos.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Hero(BaseModel):
    """Herói do catálogo (igualdade estrutural)."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    identifier: str = Field(..., alias="id")
    name: str
    description: str
    photo: str
    favorite: bool

    def to_wire(self) -> dict[str, object]:
        """Representação JSON com as chaves do backend."""
        return self.model_dump(by_alias=True)
