"""Persistencia local de credenciales.

Un único fichero JSON `{"apiKey": ..., "user": ...}` por usuario del sistema.
Sin perfiles múltiples y sin locking.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from core.config import AppSettings
from core.domain.models import Credentials
from core.errors import LocalIOFailure, NotAuthenticated

logger = logging.getLogger(__name__)


class CredentialStore:
    def __init__(self, path: Path) -> None:
        self.path = path

    @classmethod
    def from_settings(cls, settings: AppSettings) -> "CredentialStore":
        return cls(settings.credentials_path)

    def load(self) -> Credentials:
        """Lee las credenciales; ausente o corrupto se trata igual."""

        try:
            payload = json.loads(self.path.read_text(encoding="utf-8"))
            return Credentials.model_validate(payload)
        except (OSError, ValueError, ValidationError) as exc:
            logger.debug("Cannot load credentials from %s: %r", self.path, exc)
            raise NotAuthenticated(path=str(self.path)) from exc

    def save(self, api_key: str, user: Any) -> Credentials:
        """Sobrescribe el fichero (sin backup)."""

        credentials = Credentials(api_key=api_key, user=user)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(
                json.dumps(credentials.to_file_payload(), ensure_ascii=False, indent=2),
                encoding="utf-8",
            )
            self.path.chmod(0o600)
        except OSError as exc:
            raise LocalIOFailure(f"Cannot write credentials: {exc.strerror or exc}", str(self.path)) from exc
        logger.debug("Credentials saved to %s", self.path)
        return credentials

    def clear(self) -> bool:
        """Borra el fichero. Devuelve False si no existía."""

        if not self.path.exists():
            return False
        try:
            self.path.unlink()
        except FileNotFoundError:
            return False
        except OSError as exc:
            raise LocalIOFailure(f"Cannot delete credentials: {exc.strerror or exc}", str(self.path)) from exc
        return True
