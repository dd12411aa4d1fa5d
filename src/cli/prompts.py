"""Prompter de terminal (typer + rich)."""

from __future__ import annotations

from typing import Callable, Sequence, TypeVar

import typer
from rich.console import Console
from rich.markup import escape

from cli.ui_components import console
from core.services.selection import is_affirmative, parse_selection

T = TypeVar("T")


def read_line(prompt: str) -> str:
    """Una única lectura; una respuesta vacía no vuelve a preguntar."""

    return typer.prompt(prompt, default="", show_default=False)


class TerminalPrompter:
    """Implementación de `core.interfaces.prompter.Prompter` sobre stdin."""

    def __init__(self, target: Console | None = None) -> None:
        self._console = target or console

    def select_one(self, prompt: str, items: Sequence[T], display: Callable[[T], str]) -> int:
        for number, item in enumerate(items, start=1):
            self._console.print(f"{number}. {escape(display(item))}")
            self._console.print()
        return parse_selection(read_line(prompt), len(items))

    def confirm(self, question: str) -> bool:
        return is_affirmative(read_line(question))
