"""Entry point de la CLI `novaenv-cli`.

Comandos: `login`, `projects`, `logout`, `help` (`--help`, `-h`). Sin
argumentos se muestra la ayuda; un comando desconocido imprime un aviso y
termina con exit code 1.
"""

from __future__ import annotations

import click
import typer
from pydantic import ValidationError
from rich.markup import escape
from typer.core import TyperGroup

from adapters.credential_store import CredentialStore
from adapters.novaenv_api import NovaEnvClient
from cli.logging_setup import configure_logging
from cli.prompts import TerminalPrompter, read_line
from cli.ui_components import console, failure, notice, print_banner, print_help, print_section, success
from core.config import APP_NAME, AppSettings, get_user_env_file
from core.errors import AuthenticationFailed, LocalIOFailure, RequestFailed, TransportError
from core.services.env_pipeline import Abort, EnvPullPipeline, PipelineHooks

HELP_ALIASES = ("--help", "-h")


class DispatchGroup(TyperGroup):
    """Mapea el primer token a un comando, con ayuda y error propios."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        print_banner()
        if not args or args[0] in HELP_ALIASES:
            args = ["help"]
        elif args[0] not in self.commands:
            failure(f"Unknown command: {args[0]}")
            console.print(f'Run "{APP_NAME} help" for available commands')
            ctx.exit(1)
        return super().parse_args(ctx, args)


app = typer.Typer(
    cls=DispatchGroup,
    add_completion=False,
    help="NovaEnv CLI - pull environment variables into a local .env file.",
)


def load_settings() -> AppSettings:
    try:
        # La ruta del .env de usuario depende del entorno en el momento de la llamada.
        return AppSettings(_env_file=get_user_env_file())
    except ValidationError as exc:
        failure(f"Invalid configuration: {exc.errors()[0]['msg']}")
        raise typer.Exit(1) from exc


def build_service_client(settings: AppSettings) -> NovaEnvClient:
    return NovaEnvClient(settings)


@app.callback()
def main() -> None:
    """NovaEnv CLI."""


def _bootstrap() -> AppSettings:
    settings = load_settings()
    configure_logging(settings.log_level)
    return settings


@app.command()
def login() -> None:
    """Login with your API key."""

    settings = _bootstrap()
    print_section("🔐 Login to NovaEnv CLI")

    api_key = read_line("Enter your API key").strip()
    if not api_key:
        failure("API key is required")
        raise typer.Exit(1)

    console.print("🔄 Verifying API key...")
    client = build_service_client(settings)
    try:
        user = client.verify_key(api_key)
    except AuthenticationFailed:
        failure("Login failed: Invalid API key")
        raise typer.Exit(1)
    except (RequestFailed, TransportError) as exc:
        failure(f"Login failed: {exc.message}")
        raise typer.Exit(1)

    store = CredentialStore.from_settings(settings)
    try:
        store.save(api_key, user.model_dump(mode="json", exclude_unset=True))
    except LocalIOFailure as exc:
        failure(f"Login failed: {exc.message}")
        raise typer.Exit(1)
    success(f"Successfully logged in as {user.display_name()}")


@app.command()
def projects() -> None:
    """List and select projects, then write the chosen environment to .env."""

    settings = _bootstrap()
    pipeline = EnvPullPipeline(
        client=build_service_client(settings),
        prompter=TerminalPrompter(),
        credentials=CredentialStore.from_settings(settings),
        env_path=settings.env_file_path(),
        hooks=PipelineHooks(section=print_section),
    )
    outcome = pipeline.run()
    if isinstance(outcome, Abort):
        failure(outcome.reason)
        raise typer.Exit(outcome.exit_code)
    if outcome.path is None:
        console.print(escape(outcome.message))
        return
    success(outcome.message)
    console.print(f"📁 File saved at: {escape(str(outcome.path))}")


@app.command()
def logout() -> None:
    """Logout and clear credentials."""

    settings = _bootstrap()
    store = CredentialStore.from_settings(settings)
    try:
        removed = store.clear()
    except LocalIOFailure as exc:
        failure(f"Error during logout: {exc.message}")
        raise typer.Exit(1)
    if removed:
        success("Successfully logged out")
    else:
        notice("Already logged out")


@app.command(name="help")
def show_help() -> None:
    """Show this help message."""

    print_help()


def run() -> None:
    app(prog_name=APP_NAME)
