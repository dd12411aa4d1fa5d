"""
Test Configuration and Fixtures
===============================

Fakes en memoria para el cliente del servicio y el prompter, más settings
apuntando a ficheros temporales.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Sequence

import pytest

from core.config import AppSettings
from core.domain.models import Environment, Project, UserInfo
from core.errors import AuthenticationFailed
from core.services.selection import is_affirmative, parse_selection


class FakeServiceClient:
    """`ServiceClient` en memoria que registra cada llamada."""

    def __init__(
        self,
        *,
        projects: list[Project] | None = None,
        environments: list[Environment] | None = None,
        variables: list[str] | None = None,
        user: UserInfo | None = None,
        errors: dict[str, Exception] | None = None,
    ) -> None:
        self.projects = projects or []
        self.environments = environments or []
        self.variables = variables or []
        self.user = user
        self.errors = errors or {}
        self.calls: list[tuple] = []

    def _maybe_raise(self, name: str) -> None:
        if name in self.errors:
            raise self.errors[name]

    def verify_key(self, api_key: str) -> UserInfo:
        self.calls.append(("verify_key", api_key))
        self._maybe_raise("verify_key")
        if self.user is None:
            raise AuthenticationFailed(status_code=401)
        return self.user

    def list_projects(self, api_key: str) -> list[Project]:
        self.calls.append(("list_projects", api_key))
        self._maybe_raise("list_projects")
        return list(self.projects)

    def list_environments(self, api_key: str, project_id: str) -> list[Environment]:
        self.calls.append(("list_environments", api_key, project_id))
        self._maybe_raise("list_environments")
        return list(self.environments)

    def list_variables(self, api_key: str, project_id: str, environment_id: str) -> list[str]:
        self.calls.append(("list_variables", api_key, project_id, environment_id))
        self._maybe_raise("list_variables")
        return list(self.variables)


class FakePrompter:
    """`Prompter` que responde con una cola de respuestas prefijadas."""

    def __init__(self, answers: Sequence[str] = ()) -> None:
        self.answers = list(answers)
        self.prompts: list[str] = []
        self.rendered: list[str] = []

    def _next(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.answers:
            raise AssertionError(f"unexpected prompt: {prompt}")
        return self.answers.pop(0)

    def select_one(self, prompt: str, items: Sequence, display: Callable) -> int:
        self.rendered.extend(display(item) for item in items)
        return parse_selection(self._next(prompt), len(items))

    def confirm(self, question: str) -> bool:
        return is_affirmative(self._next(question))


@pytest.fixture
def credentials_path(tmp_path: Path) -> Path:
    return tmp_path / "home" / "novaenv-cli-config.json"


@pytest.fixture
def settings(tmp_path: Path, credentials_path: Path) -> AppSettings:
    return AppSettings(
        _env_file=None,
        api_base_url="http://novaenv.test/api/v1",
        credentials_path=credentials_path,
    )


@pytest.fixture
def sample_projects() -> list[Project]:
    return [
        Project.model_validate(
            {"_id": "66a1", "projectId": "PRJ-ALPHA", "name": "alpha", "createdAt": "2024-05-01T10:00:00Z"}
        ),
        Project.model_validate({"_id": "66a2", "projectId": "PRJ-BETA", "name": "beta"}),
    ]


@pytest.fixture
def sample_environments() -> list[Environment]:
    return [
        Environment.model_validate({"enviornmentId": "env-dev", "name": "development"}),
        Environment.model_validate({"enviornmentId": "env-prod", "name": "production"}),
    ]
