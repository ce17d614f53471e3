# SPDX-License-Identifier: MIT

"""Calendar math for the proleptic Gregorian calendar.

Weekdays are derived from the day count (ordinal) of a date, where
0001-01-01 is day 1 and a Monday, so nothing here depends on the locale.
"""

import pendulum

from compact_calendar.exceptions import InvalidDateError, InvalidYearError
from compact_calendar.model.month_day import MonthDay
from compact_calendar.model.week_start import WeekStart

MIN_YEAR = 1
MAX_YEAR = 9999

_MONTH_LENGTHS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    if month == 2 and is_leap_year(year):
        return 29
    return _MONTH_LENGTHS[month - 1]


def days_in_year(year: int) -> int:
    return 366 if is_leap_year(year) else 365


def make_date(year: int, month: int, day: int) -> pendulum.Date:
    """Build a validated date.

    Raises:
        InvalidYearError: If the year is outside MIN_YEAR..MAX_YEAR
        InvalidDateError: If the month or day does not exist in that year
    """
    if year < MIN_YEAR or year > MAX_YEAR:
        raise InvalidYearError(year)
    if month < 1 or month > 12 or day < 1 or day > days_in_month(year, month):
        raise InvalidDateError(f"{year:04d}-{month:02d}-{day:02d}")
    return pendulum.date(year, month, day)


def make_month_day(month: int, day: int) -> MonthDay:
    """Build a validated month-day; 02-29 is allowed and only matches leap years."""
    if month < 1 or month > 12 or day < 1 or day > days_in_month(2000, month):
        raise InvalidDateError(f"{month:02d}-{day:02d}")
    return MonthDay(month, day)


def month_day_of(date: pendulum.Date) -> MonthDay:
    return MonthDay(date.month, date.day)


def _weekday_from_ordinal(ordinal: int) -> int:
    return (ordinal - 1) % 7


def day_of_week(date: pendulum.Date) -> pendulum.WeekDay:
    return pendulum.WeekDay(_weekday_from_ordinal(date.toordinal()))


def is_weekend(date: pendulum.Date) -> bool:
    return day_of_week(date) in (pendulum.SATURDAY, pendulum.SUNDAY)


def _first_weekday(week_start: WeekStart) -> int:
    if week_start == WeekStart.SUNDAY:
        return int(pendulum.SUNDAY)
    return int(pendulum.MONDAY)


def weekday_index(date: pendulum.Date, week_start: WeekStart) -> int:
    """Column of a date in a week row, 0 being the configured first day."""
    return (int(day_of_week(date)) - _first_weekday(week_start)) % 7


def align_to_week_start(date: pendulum.Date, week_start: WeekStart) -> pendulum.Date:
    return date.subtract(days=weekday_index(date, week_start))


def _january_first_ordinal(year: int) -> int:
    if year < MIN_YEAR:
        # Year 0 is a leap year in the proleptic calendar
        return 1 - days_in_year(year)
    return pendulum.date(year, 1, 1).toordinal()


def _first_week_start_ordinal(year: int, week_start: WeekStart) -> int:
    jan_first = _january_first_ordinal(year)
    offset = (_first_weekday(week_start) - _weekday_from_ordinal(jan_first)) % 7
    return jan_first + offset


def week_number(date: pendulum.Date, week_start: WeekStart) -> int:
    """Week of the year for a date.

    Week 1 begins on the first week-start day on or after January 1st. Days
    before that boundary belong to the last week of the previous year.
    """
    ordinal = date.toordinal()
    first = _first_week_start_ordinal(date.year, week_start)
    if ordinal < first:
        first = _first_week_start_ordinal(date.year - 1, week_start)
    return (ordinal - first) // 7 + 1


def month_day_in_range(md: MonthDay, start: MonthDay, end: MonthDay) -> bool:
    """Whether a month-day lies in [start, end], wrapping when end < start."""
    if start <= end:
        return start <= md <= end
    return md >= start or md <= end


def days_of_year(year: int) -> list[pendulum.Date]:
    first = make_date(year, 1, 1)
    return [first.add(days=offset) for offset in range(days_in_year(year))]
