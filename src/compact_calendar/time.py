# SPDX-License-Identifier: MIT

import re
from typing import Union

import pendulum

from compact_calendar.dates import make_date, make_month_day
from compact_calendar.exceptions import InvalidDateError
from compact_calendar.model.month_day import MonthDay

_MONTH_DAY_PATTERN = re.compile(r"^(\d{1,2})-(\d{1,2})$")


def today_local() -> pendulum.Date:
    return pendulum.today("local").date()


def current_year() -> int:
    return pendulum.now("local").year


def date_from_str(date_str: str) -> pendulum.Date:
    """Parse a 'YYYY-MM-DD' string into a validated date."""
    try:
        parsed = pendulum.from_format(date_str.strip(), "YYYY-MM-DD")
    except ValueError as e:
        raise InvalidDateError(date_str) from e
    return make_date(parsed.year, parsed.month, parsed.day)


def month_day_from_str(month_day_str: str) -> MonthDay:
    """Parse a 'MM-DD' string into a validated month-day."""
    match = _MONTH_DAY_PATTERN.match(month_day_str.strip())
    if match is None:
        raise InvalidDateError(month_day_str)
    month, day = (int(group) for group in match.groups())
    return make_month_day(month, day)


def date_or_month_day_from_str(value: str) -> Union[pendulum.Date, MonthDay]:
    """Parse either a full date or a yearly month-day, by the shape of the string."""
    if _MONTH_DAY_PATTERN.match(value.strip()):
        return month_day_from_str(value)
    return date_from_str(value)


def date_to_display_str(date: pendulum.Date) -> str:
    return date.format("MM/DD")
