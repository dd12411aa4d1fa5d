"""Validación de selecciones numéricas (1-based) y confirmaciones."""

from __future__ import annotations

import re

from core.errors import InvalidSelection

_INTEGER = re.compile(r"[+-]?[0-9]+")


def parse_selection(raw: str, count: int) -> int:
    """Convierte la respuesta del usuario en un índice 0-based.

    Acepta solo dígitos ASCII (con signo opcional) dentro de `[1, count]`;
    cualquier otra cosa lanza `InvalidSelection`.
    """

    text = raw.strip()
    if not _INTEGER.fullmatch(text):
        raise InvalidSelection(raw, count)
    number = int(text)
    if not 1 <= number <= count:
        raise InvalidSelection(raw, count)
    return number - 1


def is_affirmative(answer: str) -> bool:
    """Solo `y` confirma; vacío o cualquier otra respuesta es un no."""

    return answer.strip().lower() == "y"
