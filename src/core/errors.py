"""Jerarquía de errores de NovaEnv CLI.

Los adaptadores lanzan estas excepciones; el pipeline y los comandos de la
CLI las capturan en el punto donde ocurren y las convierten en un mensaje
para el usuario y un exit code.
"""

from __future__ import annotations


class NovaEnvError(Exception):
    """Base de todos los errores de la aplicación."""

    def __init__(self, message: str, context: str = "") -> None:
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.context:
            return f"[{self.context}] {self.message}"
        return self.message


class NotAuthenticated(NovaEnvError):
    """No hay credenciales locales, o el fichero está corrupto."""

    def __init__(self, message: str = "Not logged in", path: str = "") -> None:
        self.path = path
        super().__init__(message, context="credentials")


class AuthenticationFailed(NovaEnvError):
    """El servicio rechazó la API key."""

    def __init__(self, message: str = "Invalid API key", status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message, context="auth")


class RequestFailed(NovaEnvError):
    """Respuesta no-200, o una respuesta 200 con forma inesperada."""

    def __init__(self, message: str, status_code: int | None = None, endpoint: str = "") -> None:
        self.status_code = status_code
        self.endpoint = endpoint
        super().__init__(message, context=endpoint)


class TransportError(NovaEnvError):
    """Fallo de red (conexión, DNS, timeout) independiente del status HTTP."""

    def __init__(self, message: str, endpoint: str = "") -> None:
        self.endpoint = endpoint
        super().__init__(message, context=endpoint)


class InvalidSelection(NovaEnvError):
    """Selección no numérica o fuera de rango."""

    def __init__(self, raw: str, count: int) -> None:
        self.raw = raw
        self.count = count
        super().__init__(f"Invalid selection: {raw!r} (expected 1-{count})")


class LocalIOFailure(NovaEnvError):
    """Fallo al leer/escribir/borrar un fichero local."""

    def __init__(self, message: str, path: str = "") -> None:
        self.path = path
        super().__init__(message, context=path)
