"""Contrato del cliente del servicio NovaEnv.

El pipeline depende de este Protocol y no de httpx: los tests lo sustituyen
por un fake en memoria.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import Environment, Project, UserInfo


@runtime_checkable
class ServiceClient(Protocol):
    """Las cuatro llamadas del servicio; cada una es un único round trip.

    Errores esperados:
    - `AuthenticationFailed` (solo `verify_key`)
    - `RequestFailed` para respuestas no-200 o con forma inesperada
    - `TransportError` para fallos de red
    """

    def verify_key(self, api_key: str) -> UserInfo:
        ...

    def list_projects(self, api_key: str) -> list[Project]:
        ...

    def list_environments(self, api_key: str, project_id: str) -> list[Environment]:
        ...

    def list_variables(self, api_key: str, project_id: str, environment_id: str) -> list[str]:
        ...
