from __future__ import annotations

import logging

from rich.logging import RichHandler

from cli.ui_components import err_console

_HANDLER_NAME = "novaenv-rich"


def configure_logging(level: str = "WARNING") -> None:
    """Instala un `RichHandler` en stderr (una sola vez por proceso)."""

    root = logging.getLogger()
    root.setLevel(level)
    if any(handler.get_name() == _HANDLER_NAME for handler in root.handlers):
        return
    handler = RichHandler(console=err_console, rich_tracebacks=True, show_path=False)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    root.addHandler(handler)
    # httpx/httpcore loguean cabeceras (Authorization) en DEBUG.
    for noisy in ("httpx", "httpcore"):
        logging.getLogger(noisy).setLevel(max(logging.getLevelName(level), logging.WARNING))
