"""Componentes de UI para CLI (Rich).

Banner, cabeceras de sección, ayuda y mensajes de estado reutilizados por
los comandos.
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.config import APP_NAME, APP_VERSION

console = Console(highlight=False, soft_wrap=True)
err_console = Console(stderr=True, highlight=False, soft_wrap=True)

COMMANDS: tuple[tuple[str, str], ...] = (
    ("login", "Login with your API key"),
    ("projects", "List and select projects"),
    ("logout", "Logout and clear credentials"),
    ("help", "Show this help message"),
)


def print_banner(target: Console | None = None) -> None:
    (target or console).print(f"🔧 NovaEnv CLI v{APP_VERSION}\n")


def print_section(title: str, target: Console | None = None) -> None:
    target = target or console
    target.print()
    target.print(Text(title, style="bold cyan"))
    target.print("═" * max(len(title), 15), style="cyan")
    target.print()


def build_commands_table() -> Table:
    table = Table(title="Commands", show_header=False, box=None, padding=(0, 2))
    table.add_column("Command", style="bright_green", no_wrap=True)
    table.add_column("Description", style="white")
    for name, description in COMMANDS:
        table.add_row(name, description)
    return table


def print_help(target: Console | None = None) -> None:
    """Imprime la ayuda de comandos y ejemplos de uso."""

    target = target or console
    title = Text("🚀 EnvVar CLI - Environment Variable Manager", style="bold cyan")
    target.print(Panel(title, border_style="cyan"))
    target.print(build_commands_table())
    target.print()
    target.print(Text("Usage:", style="bold"))
    for name, _ in COMMANDS[:-1]:
        target.print(f"  {APP_NAME} {name}")


def success(message: str) -> None:
    console.print(f"[green]✅[/green] {escape(message)}")


def notice(message: str) -> None:
    console.print(f"ℹ️  {escape(message)}")


def failure(message: str) -> None:
    err_console.print(f"[red]❌[/red] {escape(message)}")
