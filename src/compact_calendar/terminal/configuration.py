# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from compact_calendar import configuration
from compact_calendar.exceptions import CalendarError
from compact_calendar.model.week_start import WeekStart
from compact_calendar.repository.configuration import CONFIGURATION_REPO
from compact_calendar.terminal.custom_typer import AliasedTyperGroup
from compact_calendar.terminal.error import exit_with_error

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


def _enabled(value: bool) -> str:
    return "✓ Enabled" if value else "✗ Disabled"


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    try:
        config = CONFIGURATION_REPO.get_config()
    except CalendarError as e:
        exit_with_error(e)

    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("week_start", config["week_start"])
    table.add_row("dim_weekends", _enabled(config["dim_weekends"]))
    table.add_row("strikethrough_past", _enabled(config["strikethrough_past"]))
    table.add_row("work_mode", _enabled(config["work_mode"]))
    table.add_row("show_week_numbers", _enabled(config["show_week_numbers"]))
    table.add_row(
        "highlights_path",
        config["highlights_path"]
        or f"{configuration.DEFAULT_HIGHLIGHTS_PATH} (default)",
    )
    table.add_row("config_path", str(configuration.APP_CONFIG_PATH))

    console.print(table)


@app.command("set, s")
def set_config(
    week_start: Annotated[
        Optional[WeekStart],
        typer.Option("--week-start", help="First day of the week"),
    ] = None,
    dim_weekends: Annotated[
        Optional[bool],
        typer.Option(
            "--dim-weekends/--no-dim-weekends",
            help="Dim Saturday and Sunday by default",
            show_default=False,
        ),
    ] = None,
    strikethrough_past: Annotated[
        Optional[bool],
        typer.Option(
            "--strikethrough-past/--no-strikethrough-past",
            help="Cross out past dates by default",
            show_default=False,
        ),
    ] = None,
    work_mode: Annotated[
        Optional[bool],
        typer.Option(
            "--work/--no-work",
            help="Never highlight weekends by default",
            show_default=False,
        ),
    ] = None,
    show_week_numbers: Annotated[
        Optional[bool],
        typer.Option(
            "--week-numbers/--no-week-numbers",
            help="Show week numbers by default",
            show_default=False,
        ),
    ] = None,
    highlights_path: Annotated[
        Optional[str],
        typer.Option("--highlights-path", help="Default highlights TOML file"),
    ] = None,
    remove_highlights_path: Annotated[
        bool,
        typer.Option(
            "--remove-highlights-path",
            help="Go back to calendar.toml in the current directory",
        ),
    ] = False,
) -> None:
    """Update configuration settings."""
    if highlights_path is not None and remove_highlights_path:
        Console(stderr=True).print(
            "[red]Cannot set and remove the highlights path at the same time[/red]"
        )
        raise typer.Exit(1)

    try:
        CONFIGURATION_REPO.update_config(
            week_start=week_start,
            dim_weekends=dim_weekends,
            strikethrough_past=strikethrough_past,
            work_mode=work_mode,
            show_week_numbers=show_week_numbers,
            highlights_path=highlights_path,
            remove_highlights_path=remove_highlights_path,
        )
    except CalendarError as e:
        exit_with_error(e)
    view()
