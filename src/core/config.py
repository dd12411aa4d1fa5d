"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- El cliente HTTP y el pipeline reciben `AppSettings` por constructor, así los
  tests apuntan a un servicio falso y a un fichero de credenciales temporal.
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

APP_NAME = "novaenv-cli"
APP_VERSION = "1.0.0"

DEFAULT_API_BASE_URL = "http://localhost:5005/api/v1"
CREDENTIALS_FILENAME = "novaenv-cli-config.json"


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / APP_NAME
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / APP_NAME

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / APP_NAME
    return Path.home() / ".config" / APP_NAME


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def default_credentials_path() -> Path:
    return Path.home() / CREDENTIALS_FILENAME


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Un único contrato de configuración para CLI/adapters. Se lee de variables
    `NOVAENV_*` y del `.env` global del usuario; nunca del `.env` del proyecto,
    que es el artefacto que esta herramienta escribe.
    """

    model_config = SettingsConfigDict(
        env_prefix="NOVAENV_",
        extra="ignore",
        case_sensitive=False,
        env_file=str(get_user_env_file()),
        env_file_encoding="utf-8",
    )

    api_base_url: str = Field(
        default=DEFAULT_API_BASE_URL,
        min_length=8,
        description="Base URL del servicio NovaEnv (http o https).",
    )
    credentials_path: Path = Field(
        default_factory=default_credentials_path,
        description="Fichero JSON con la API key y la info de usuario cacheada.",
    )
    env_filename: str = Field(
        default=".env",
        min_length=1,
        description="Nombre del fichero generado en el directorio actual.",
    )
    http_timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Timeout por request (segundos). Sin timeout si no se define.",
    )
    user_agent: str = Field(
        default=f"{APP_NAME}/{APP_VERSION}",
        min_length=1,
        description="User-Agent enviado al servicio.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Nivel de logging (DEBUG, INFO, WARNING, ERROR, CRITICAL).",
    )

    @field_validator("api_base_url")
    @classmethod
    def _check_scheme(cls, value: str) -> str:
        value = value.strip().rstrip("/")
        if not value.startswith(("http://", "https://")):
            raise ValueError("api_base_url must start with http:// or https://")
        return value

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value}")
        return level

    def env_file_path(self, cwd: Path | None = None) -> Path:
        """Ruta absoluta del `.env` que se genera (por defecto en el cwd)."""

        return ((cwd or Path.cwd()) / self.env_filename).resolve()
