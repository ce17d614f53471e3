# SPDX-License-Identifier: MIT

import logging
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler

from compact_calendar.terminal import configuration
from compact_calendar.terminal.colors import colors
from compact_calendar.terminal.custom_typer import AliasedTyperGroup
from compact_calendar.terminal.show import show

app = typer.Typer(
    cls=AliasedTyperGroup,
    help="Compact Calendar - A year at a glance in the CLI",
    no_args_is_help=True,
)
app.add_typer(configuration.app, name="config, c", help="View or change defaults")
app.command(name="show, s")(show)
app.command(name="colors, co")(colors)


def configure_logging(verbose: bool) -> None:
    handler = RichHandler(console=Console(stderr=True), show_path=False)
    package_logger = logging.getLogger("compact_calendar")
    package_logger.handlers = [handler]
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    package_logger.propagate = False


@app.callback()
def main_callback(
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Log what is loaded and built",
        ),
    ] = False,
) -> None:
    """
    Compact Calendar - A year at a glance in the CLI

    Global options that apply to all commands.
    """
    configure_logging(verbose)


def run() -> None:
    app()
