# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console

from compact_calendar import configuration
from compact_calendar.exceptions import CalendarError
from compact_calendar.model.calendar_options import CalendarOptions
from compact_calendar.model.week_start import WeekStart
from compact_calendar.repository.configuration import CONFIGURATION_REPO
from compact_calendar.repository.highlights import load_highlights
from compact_calendar.service.calendar import build_calendar, rule_store_from_highlights
from compact_calendar.terminal.error import exit_with_error
from compact_calendar.terminal.parse import parse_today
from compact_calendar.time import current_year


def _resolve_highlights_path(config_path: Optional[Path]) -> Path:
    if config_path is not None:
        return config_path
    configured = CONFIGURATION_REPO.get_config()["highlights_path"]
    if configured is not None:
        return Path(configured).expanduser()
    return configuration.DEFAULT_HIGHLIGHTS_PATH


def _first_set(value: Optional[bool], default: bool) -> bool:
    return default if value is None else value


def show(
    year: Annotated[
        Optional[int],
        typer.Option("--year", "-y", help="Year to display (defaults to current year)"),
    ] = None,
    config_path: Annotated[
        Optional[Path],
        typer.Option(
            "--config",
            "-c",
            help="Path to TOML file with date highlights",
        ),
    ] = None,
    sunday: Annotated[
        Optional[bool],
        typer.Option(
            "--sunday/--monday",
            "-s/-m",
            help="Start weeks on Sunday instead of Monday",
            show_default=False,
        ),
    ] = None,
    dim_weekends: Annotated[
        Optional[bool],
        typer.Option(
            "--dim-weekends/--no-dim-weekends",
            help="Dim Saturday and Sunday",
            show_default=False,
        ),
    ] = None,
    work: Annotated[
        Optional[bool],
        typer.Option(
            "--work/--no-work",
            "-w/-W",
            help="Work mode: never highlight Saturday and Sunday",
            show_default=False,
        ),
    ] = None,
    strikethrough_past: Annotated[
        Optional[bool],
        typer.Option(
            "--strikethrough-past/--no-strikethrough-past",
            help="Cross out dates before today",
            show_default=False,
        ),
    ] = None,
    week_numbers: Annotated[
        Optional[bool],
        typer.Option(
            "--week-numbers/--no-week-numbers",
            help="Show week numbers in the left column",
            show_default=False,
        ),
    ] = None,
    today: Annotated[
        Optional[str],
        typer.Option("--today", help="Treat this YYYY-MM-DD date as today"),
    ] = None,
    no_color: Annotated[
        bool,
        typer.Option("--no-color", help="Print without colors or styles"),
    ] = False,
) -> None:
    """
    Display a year at a glance with highlighted dates.

    Options that are not given fall back to the values set with `config set`.
    """
    today_date = parse_today(today)
    try:
        config = CONFIGURATION_REPO.get_config()
    except CalendarError as e:
        exit_with_error(e)

    if sunday is None:
        week_start = WeekStart(config["week_start"])
    else:
        week_start = WeekStart.SUNDAY if sunday else WeekStart.MONDAY

    options: CalendarOptions = {
        "year": year if year is not None else current_year(),
        "week_start": week_start,
        "dim_weekends": _first_set(dim_weekends, config["dim_weekends"]),
        "work_mode": _first_set(work, config["work_mode"]),
        "strikethrough_past": _first_set(
            strikethrough_past, config["strikethrough_past"]
        ),
        "show_week_numbers": _first_set(week_numbers, config["show_week_numbers"]),
    }

    highlights_path = _resolve_highlights_path(config_path)
    try:
        highlights = load_highlights(highlights_path)
        rule_store = rule_store_from_highlights(highlights)
        calendar = build_calendar(rule_store, options, today_date)
    except CalendarError as e:
        exit_with_error(e)

    if no_color:
        console = Console(color_system=None, highlight=False)
    else:
        console = Console(highlight=False)
    console.print(calendar, soft_wrap=True, end="")
