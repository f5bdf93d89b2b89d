"""Transformation - sub-item de um herói retornado por /api/heros/tranformations."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Transformation(BaseModel):
    """Transformação de um herói (igualdade estrutural)."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    identifier: str = Field(..., alias="id")
    photo: str
    name: str
    description: str

    def to_wire(self) -> dict[str, object]:
        """Representação JSON com as chaves do backend."""
        return self.model_dump(by_alias=True)
