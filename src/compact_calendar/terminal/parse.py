# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum
import typer

from compact_calendar.exceptions import InvalidDateError, InvalidYearError
from compact_calendar.time import date_from_str, today_local


def parse_today(today_param: Optional[str]) -> pendulum.Date:
    """
    Parse the --today option, defaulting to the local date.

    Raises:
        typer.BadParameter: If the value is not a valid YYYY-MM-DD date
    """
    if today_param is None:
        return today_local()
    try:
        return date_from_str(today_param)
    except (InvalidDateError, InvalidYearError) as e:
        raise typer.BadParameter(f"{e} (expected YYYY-MM-DD)")

