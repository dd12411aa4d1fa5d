"""Contrato del selector interactivo."""

from __future__ import annotations

from typing import Callable, Protocol, Sequence, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class Prompter(Protocol):
    """Lectura de la entrada del usuario.

    Reglas:
    - Una sola lectura por llamada; no se vuelve a preguntar ante una
      respuesta inválida.
    - `select_one` devuelve un índice 0-based o lanza `InvalidSelection`.
    """

    def select_one(self, prompt: str, items: Sequence[T], display: Callable[[T], str]) -> int:
        ...

    def confirm(self, question: str) -> bool:
        ...
