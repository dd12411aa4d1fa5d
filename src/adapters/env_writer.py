"""Exportación de variables a un fichero `.env`.

Las líneas llegan ya formateadas (`KEY=VALUE`) y se escriben tal cual:
sobrescritura completa, UTF-8, LF.
"""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from core.errors import LocalIOFailure


def render_env_content(lines: Sequence[str]) -> str:
    return "".join(f"{line}\n" for line in lines)


def write_env_file(*, lines: Sequence[str], output_path: Path) -> int:
    """Escribe `lines` en `output_path` y devuelve cuántas se escribieron."""

    try:
        output_path.write_text(render_env_content(lines), encoding="utf-8", newline="\n")
    except OSError as exc:
        raise LocalIOFailure(f"Cannot write {output_path.name}: {exc.strerror or exc}", str(output_path)) from exc
    return len(lines)
