"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Las líneas de datos (keys, proyecciones) las imprime el comando en plano;
  solo los diagnósticos (errores, logs) pasan por Rich, siempre en stderr.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.text import Text

from core.domain.errors import ServerListError

err_console = Console(stderr=True)


def configure_logging(verbose: bool = False) -> None:
    """Install a Rich handler on stderr (DEBUG when verbose, else WARNING)."""

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def print_error(error: ServerListError, console: Console | None = None) -> None:
    console = console or err_console
    console.print(Text(f"error: {error.message}", style="bold red"), soft_wrap=True)
