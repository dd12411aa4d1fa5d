"""Pipeline `projects`: proyecto -> entorno -> variables -> `.env`.

Cada etapa recibe el `PullState` acumulado y devuelve un resultado etiquetado:

- `Continue(state)`: pasa a la siguiente etapa.
- `Done(message)`: fin normal (incluye listas vacías).
- `Abort(reason)`: fin con error; la CLI lo traduce a exit code != 0.

No hay vuelta atrás ni paralelismo. Los efectos visibles (cabeceras de
sección) pasan por `PipelineHooks`, así que el pipeline se ejecuta igual sin
terminal.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Callable, Union

from adapters.credential_store import CredentialStore
from adapters.env_writer import write_env_file
from core.domain.models import Credentials, Environment, Project
from core.errors import InvalidSelection, LocalIOFailure, NotAuthenticated, RequestFailed, TransportError
from core.interfaces.prompter import Prompter
from core.interfaces.service_client import ServiceClient

logger = logging.getLogger(__name__)

LOGIN_FIRST_MESSAGE = "Please login first using: novaenv-cli login"


@dataclass(frozen=True)
class PullState:
    credentials: Credentials | None = None
    projects: tuple[Project, ...] = ()
    project: Project | None = None
    environments: tuple[Environment, ...] = ()
    environment: Environment | None = None
    variables: tuple[str, ...] = ()


@dataclass(frozen=True)
class Continue:
    value: PullState


@dataclass(frozen=True)
class Done:
    message: str
    count: int = 0
    path: Path | None = None


@dataclass(frozen=True)
class Abort:
    reason: str
    exit_code: int = 1


StageResult = Union[Continue, Done, Abort]
Outcome = Union[Done, Abort]


@dataclass
class PipelineHooks:
    """Callbacks opcionales para la capa de UI."""

    section: Callable[[str], None] | None = None


def describe_project(project: Project) -> str:
    lines = [project.name, f"   ID: {project.project_id}"]
    if project.created_at is not None:
        lines.append(f"   Created: {project.created_at.date().isoformat()}")
    return "\n".join(lines)


def describe_environment(environment: Environment) -> str:
    return environment.name


@dataclass
class EnvPullPipeline:
    """Orquesta la descarga de variables hacia `env_path`."""

    client: ServiceClient
    prompter: Prompter
    credentials: CredentialStore
    env_path: Path
    hooks: PipelineHooks = field(default_factory=PipelineHooks)

    def _section(self, title: str) -> None:
        if self.hooks.section:
            self.hooks.section(title)

    @property
    def stages(self) -> tuple[Callable[[PullState], StageResult], ...]:
        return (
            self.authenticate,
            self.fetch_projects,
            self.select_project,
            self.fetch_environments,
            self.select_environment,
            self.fetch_variables,
            self.write_file,
        )

    def run(self) -> Outcome:
        result: StageResult = Continue(PullState())
        for stage in self.stages:
            if not isinstance(result, Continue):
                break
            logger.debug("stage %s", stage.__name__)
            result = stage(result.value)
        if isinstance(result, Continue):
            # write_file siempre termina; no debería quedar un Continue.
            return Done("Nothing to do.")
        if isinstance(result, Abort):
            logger.info("pipeline aborted: %s", result.reason)
        return result

    def authenticate(self, state: PullState) -> StageResult:
        try:
            credentials = self.credentials.load()
        except NotAuthenticated:
            return Abort(LOGIN_FIRST_MESSAGE)
        return Continue(replace(state, credentials=credentials))

    def fetch_projects(self, state: PullState) -> StageResult:
        self._section("📂 Your Projects")
        try:
            projects = self.client.list_projects(state.credentials.api_key)
        except (RequestFailed, TransportError) as exc:
            return Abort(exc.message)
        if not projects:
            return Done("No projects found.")
        return Continue(replace(state, projects=tuple(projects)))

    def select_project(self, state: PullState) -> StageResult:
        try:
            index = self.prompter.select_one("Select project (enter number)", state.projects, describe_project)
        except InvalidSelection:
            return Abort("Invalid selection")
        return Continue(replace(state, project=state.projects[index]))

    def fetch_environments(self, state: PullState) -> StageResult:
        project = state.project
        self._section(f'🌍 Environments for "{project.name}"')
        try:
            environments = self.client.list_environments(state.credentials.api_key, project.project_id)
        except (RequestFailed, TransportError) as exc:
            return Abort(f"Error fetching environments: {exc.message}")
        if not environments:
            return Done("No environments found.")
        return Continue(replace(state, environments=tuple(environments)))

    def select_environment(self, state: PullState) -> StageResult:
        try:
            index = self.prompter.select_one(
                "Select environment (enter number)", state.environments, describe_environment
            )
        except InvalidSelection:
            return Abort("Invalid selection")
        return Continue(replace(state, environment=state.environments[index]))

    def fetch_variables(self, state: PullState) -> StageResult:
        environment = state.environment
        self._section(f'📝 Extracting and decrypting variables from "{environment.name}"')
        try:
            variables = self.client.list_variables(
                state.credentials.api_key,
                state.project.project_id,
                environment.environment_id,
            )
        except (RequestFailed, TransportError) as exc:
            return Abort(f"Error fetching variables: {exc.message}")
        if not variables:
            return Done("No variables found.")
        return Continue(replace(state, variables=tuple(variables)))

    def write_file(self, state: PullState) -> StageResult:
        if self.env_path.exists():
            if not self.prompter.confirm(f"{self.env_path.name} file exists. Overwrite? (y/N)"):
                return Abort("Operation cancelled")
        try:
            count = write_env_file(lines=state.variables, output_path=self.env_path)
        except LocalIOFailure as exc:
            return Abort(exc.message)
        return Done(
            f"Wohoo, Successfully extracted {count} variables to {self.env_path.name}",
            count=count,
            path=self.env_path,
        )
