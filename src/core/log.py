"""Logging de la aplicación.

Por qué Rich:
- La CLI ya usa Rich para la salida; el handler de Rich mantiene el mismo
  estilo y escribe en stderr para no mezclar logs con la credencial en stdout.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_HANDLER_NAME = "get-credential"


def configure_logging(level: str = "WARNING", *, console: Console | None = None) -> None:
    """Instala (una sola vez) el `RichHandler` en el logger raíz."""

    root = logging.getLogger()
    for handler in list(root.handlers):
        if handler.get_name() == _HANDLER_NAME:
            root.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=False,
        markup=False,
    )
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    root.addHandler(handler)
    root.setLevel(level)
