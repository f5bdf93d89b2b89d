"""Credenciais de login (transitórias, nunca persistidas)."""

from __future__ import annotations

import base64
from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class Credentials:
    """Usuário e senha informados na tela de login."""

    username: str
    password: str = field(repr=False)

    def basic_auth_token(self) -> str:
        """Retorna base64("username:password") para o header Basic."""
        raw = f"{self.username}:{self.password}".encode()
        return base64.b64encode(raw).decode("ascii")
