"""Wrapper de httpx.

Estandariza base URL, timeout, headers (bearer token, JSON, User-Agent) para
las llamadas al servicio. Se puede inyectar un `transport` (p.ej.
`httpx.MockTransport`) para testear sin red.
"""

from __future__ import annotations

import httpx

from core.config import AppSettings


def build_client(
    settings: AppSettings | None = None,
    *,
    api_key: str | None = None,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Crea un `httpx.Client` con defaults del servicio NovaEnv.

    Sin reintentos ni redirecciones: cada request es un único intento y un
    3xx se trata como cualquier otra respuesta no-200.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Content-Type": "application/json",
        "Accept": "application/json",
    }
    if api_key:
        headers["Authorization"] = f"Bearer {api_key}"
    return httpx.Client(
        base_url=settings.api_base_url,
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        headers=headers,
        transport=transport,
    )
