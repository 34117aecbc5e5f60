"""CLI principal (Typer).

Uso:
  serverlist [--address URL] [--show-keys] [KEY]

El comando solo conecta piezas: settings -> fetch -> listado de keys y/o
proyección. Todos los datos se imprimen aquí, en texto plano, por stdout.
"""

from __future__ import annotations

import logging

import typer
from pydantic import ValidationError

from adapters.server_list import fetch_directory
from cli.ui_components import configure_logging, print_error
from core.config import AppSettings
from core.domain.errors import ServerListError
from core.services.projection import available_keys, format_keys, project

app = typer.Typer(
    add_completion=False,
    help="Query a JSON server list: list its keys or show one key per server.",
)

logger = logging.getLogger(__name__)


def _build_settings(timeout: float | None) -> AppSettings:
    overrides: dict[str, object] = {}
    if timeout is not None:
        overrides["http_timeout_seconds"] = timeout
    try:
        return AppSettings(**overrides)
    except ValidationError as exc:
        raise typer.BadParameter("timeout must be greater than 0", param_hint="--timeout") from exc


@app.command()
def main(
    ctx: typer.Context,
    key: str | None = typer.Argument(
        None,
        help="The key to look up. Use --show-keys to list available keys.",
        show_default=False,
    ),
    address: str | None = typer.Option(
        None,
        "--address",
        "-a",
        help="Address of the server list [default: https://servers.minetest.net/list].",
        show_default=False,
    ),
    show_keys: bool = typer.Option(
        False,
        "--show-keys",
        "-s",
        help="List available keys.",
    ),
    timeout: float | None = typer.Option(
        None,
        "--timeout",
        help="HTTP timeout in seconds.",
        show_default=False,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging on stderr."),
) -> None:
    """Show one key of every server in the list, or list the available keys."""

    if key is None and not show_keys:
        help_text = ctx.get_help()
        if help_text:
            typer.echo(help_text)
        return

    configure_logging(verbose)
    settings = _build_settings(timeout)
    if address is None:
        address = settings.list_address

    try:
        directory = fetch_directory(address, settings=settings)

        if show_keys:
            typer.echo(format_keys(available_keys(directory)))

        if key is not None:
            lines = project(directory, key)
            logger.debug("printing %d lines", len(lines))
            for line in lines:
                typer.echo(line.format())
    except ServerListError as exc:
        print_error(exc)
        raise typer.Exit(code=1) from exc


def run() -> None:
    app()


if __name__ == "__main__":
    run()
