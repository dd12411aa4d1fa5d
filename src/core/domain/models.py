"""Modelos del dominio (Pydantic v2).

Describen la forma de las respuestas del servicio NovaEnv y del fichero de
credenciales. Validar aquí evita que un campo ausente en la respuesta acabe
como un `KeyError` lejos del punto donde se leyó.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import AliasChoices, BaseModel, Field
from pydantic.config import ConfigDict


class UserInfo(BaseModel):
    """Usuario devuelto por el endpoint de verificación de API key."""

    model_config = ConfigDict(extra="allow")

    name: str | None = Field(
        default=None,
        description="Nombre visible del usuario.",
    )
    email: str | None = Field(
        default=None,
        description="Correo electrónico de la cuenta.",
    )

    def display_name(self) -> str:
        return self.name or self.email or "unknown user"


class Credentials(BaseModel):
    """Contenido del fichero de credenciales local.

    `user` se guarda tal cual lo devolvió el servicio, sin normalizar.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    api_key: str = Field(
        ...,
        alias="apiKey",
        min_length=1,
        description="API key usada como bearer token.",
    )
    user: Any = Field(
        default=None,
        description="Info de usuario cacheada en el login (opaca).",
    )

    def to_file_payload(self) -> dict[str, Any]:
        return {"apiKey": self.api_key, "user": self.user}


class Project(BaseModel):
    """Proyecto listado por el servicio."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", coerce_numbers_to_str=True)

    internal_id: str | None = Field(
        default=None,
        alias="_id",
        description="Identificador interno (no se usa en las rutas).",
    )
    project_id: str = Field(
        ...,
        alias="projectId",
        min_length=1,
        description="Identificador público; escopa entornos y variables.",
    )
    name: str = Field(
        ...,
        description="Nombre del proyecto.",
    )
    created_at: datetime | None = Field(
        default=None,
        alias="createdAt",
        description="Fecha de creación (ISO 8601).",
    )


class Environment(BaseModel):
    """Entorno de un proyecto (dev, staging, prod...)."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", coerce_numbers_to_str=True)

    environment_id: str = Field(
        ...,
        # El servicio usa la grafía `enviornmentId`.
        validation_alias=AliasChoices("enviornmentId", "environmentId", "environment_id"),
        min_length=1,
        description="Identificador del entorno dentro del proyecto.",
    )
    name: str = Field(
        ...,
        description="Nombre del entorno.",
    )
