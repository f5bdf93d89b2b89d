"""Ordenação de transformações pelo número que prefixa o nome."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterable

from app.domain.transformation import Transformation

# Nomes sem número ficam no fim
NO_LEADING_NUMBER = sys.maxsize

_INTEGER = re.compile(r"[+-]?[0-9]+")


def extract_leading_number(name: str) -> int:
    """Extrai o número do primeiro token do nome ("1. Oozaru" → 1).

    O primeiro token separado por espaço, sem pontos, precisa ser inteiro.
    Valores acima de NO_LEADING_NUMBER são tratados como ausentes.
    """
    first = next((token for token in name.split(" ") if token), "")
    candidate = first.replace(".", "")
    if not _INTEGER.fullmatch(candidate):
        return NO_LEADING_NUMBER
    number = int(candidate)
    if number > NO_LEADING_NUMBER:
        return NO_LEADING_NUMBER
    return number


def sort_by_leading_number(
    transformations: Iterable[Transformation],
) -> list[Transformation]:
    """Ordenação estável pelo número extraído de cada nome."""
    return sorted(transformations, key=lambda t: extract_leading_number(t.name))
