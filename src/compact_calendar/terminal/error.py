# SPDX-License-Identifier: MIT

import logging
from typing import NoReturn

import typer
from rich.console import Console

from compact_calendar.exceptions import CalendarError

logger = logging.getLogger(__name__)


def exit_with_error(error: CalendarError) -> NoReturn:
    """Print a calendar error in red on stderr and exit with status 1."""
    logger.debug("Command failed", exc_info=error)
    Console(stderr=True).print(str(error), style="red", markup=False, highlight=False)
    raise typer.Exit(1)
