"""Cliente del servicio NovaEnv (API `/cli/*`).

Todas las llamadas son `POST` sin body con `Authorization: Bearer <apiKey>`.
Las respuestas exitosas traen un sobre `{"data": ...}`; los errores suelen
traer `{"error": "..."}`.
"""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import httpx
from pydantic import TypeAdapter, ValidationError

from adapters.http_client import build_client
from core.config import AppSettings
from core.domain.models import Environment, Project, UserInfo
from core.errors import AuthenticationFailed, RequestFailed, TransportError

logger = logging.getLogger(__name__)

AUTH_PATH = "/cli/auth/login"
PROJECTS_PATH = "/cli/project/projects"
ENVIRONMENTS_PATH = "/cli/enviornment/project/{project_id}/enviornments"
VARIABLES_PATH = "/cli/variable/project/{project_id}/enviornments/{environment_id}/variables"

_PROJECTS = TypeAdapter(list[Project])
_ENVIRONMENTS = TypeAdapter(list[Environment])
_VARIABLES = TypeAdapter(list[str])


def _segment(value: str) -> str:
    return quote(value, safe="")


def error_message(response: httpx.Response) -> str:
    """Mensaje legible de una respuesta no-200."""

    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict):
        for key in ("error", "message"):
            value = body.get(key)
            if isinstance(value, str) and value.strip():
                return value.strip()
    return f"HTTP {response.status_code}"


class NovaEnvClient:
    """Implementación httpx de `core.interfaces.service_client.ServiceClient`."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._transport = transport

    def _post(self, path: str, api_key: str) -> httpx.Response:
        logger.debug("POST %s", path)
        try:
            with build_client(self._settings, api_key=api_key, transport=self._transport) as client:
                response = client.post(path)
        except httpx.HTTPError as exc:
            logger.debug("POST %s failed: %r", path, exc)
            raise TransportError(str(exc) or exc.__class__.__name__, endpoint=path) from exc
        logger.debug("POST %s -> %s", path, response.status_code)
        return response

    def _data(self, response: httpx.Response, path: str) -> Any:
        try:
            body = response.json()
        except ValueError as exc:
            raise RequestFailed("Response is not valid JSON", response.status_code, path) from exc
        if not isinstance(body, dict) or "data" not in body:
            raise RequestFailed("Response has no 'data' field", response.status_code, path)
        return body["data"]

    def _list(self, path: str, api_key: str, adapter: TypeAdapter) -> list[Any]:
        response = self._post(path, api_key)
        if response.status_code != 200:
            raise RequestFailed(error_message(response), response.status_code, path)
        data = self._data(response, path)
        try:
            return adapter.validate_python(data)
        except ValidationError as exc:
            logger.debug("Unexpected payload from %s: %s", path, exc)
            raise RequestFailed("Unexpected response shape", response.status_code, path) from exc

    def verify_key(self, api_key: str) -> UserInfo:
        response = self._post(AUTH_PATH, api_key)
        if response.status_code != 200:
            raise AuthenticationFailed(status_code=response.status_code)
        data = self._data(response, AUTH_PATH)
        if not isinstance(data, dict):
            raise RequestFailed("Unexpected response shape", response.status_code, AUTH_PATH)
        try:
            return UserInfo.model_validate(data)
        except ValidationError as exc:
            logger.debug("Unexpected payload from %s: %s", AUTH_PATH, exc)
            raise RequestFailed("Unexpected response shape", response.status_code, AUTH_PATH) from exc

    def list_projects(self, api_key: str) -> list[Project]:
        return self._list(PROJECTS_PATH, api_key, _PROJECTS)

    def list_environments(self, api_key: str, project_id: str) -> list[Environment]:
        path = ENVIRONMENTS_PATH.format(project_id=_segment(project_id))
        return self._list(path, api_key, _ENVIRONMENTS)

    def list_variables(self, api_key: str, project_id: str, environment_id: str) -> list[str]:
        path = VARIABLES_PATH.format(
            project_id=_segment(project_id),
            environment_id=_segment(environment_id),
        )
        return self._list(path, api_key, _VARIABLES)
