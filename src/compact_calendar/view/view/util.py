# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum

from compact_calendar.dates import make_date, week_number, weekday_index
from compact_calendar.model.week_start import WeekStart

DAYS_IN_WEEK = 7


class WeekLayout:
    """
    One row of the year grid.

    Days outside the rendered year are kept as None so they render blank,
    while their ordinals still count for month boundaries and range starts.
    """

    def __init__(self, first_ordinal: int, year: int) -> None:
        self.first_ordinal = first_ordinal
        self.last_ordinal = first_ordinal + DAYS_IN_WEEK - 1
        self.dates: list[Optional[pendulum.Date]] = [
            _date_in_year(first_ordinal + offset, year)
            for offset in range(DAYS_IN_WEEK)
        ]
        self.month_start_idx = self.__find_month_start()

    def __find_month_start(self) -> Optional[int]:
        for idx, date in enumerate(self.dates):
            if date is not None and date.day == 1:
                return idx
        return None

    @property
    def month_start(self) -> Optional[int]:
        """Month number starting in this row, if any."""
        if self.month_start_idx is None:
            return None
        date = self.dates[self.month_start_idx]
        return date.month if date is not None else None

    def first_date(self) -> pendulum.Date:
        for date in self.dates:
            if date is not None:
                return date
        raise ValueError("week row has no day in the rendered year")

    def week_number(self, week_start: WeekStart) -> int:
        # Every day of a row falls in the same week
        return week_number(self.first_date(), week_start)

    def is_boundary_before(self, idx: int) -> bool:
        """Whether the day at idx starts a different month than the day before it."""
        if idx <= 0 or idx >= DAYS_IN_WEEK:
            return False
        return _month_key(self.dates[idx - 1]) != _month_key(self.dates[idx])

    def first_boundary(self) -> Optional[int]:
        for idx in range(1, DAYS_IN_WEEK):
            if self.is_boundary_before(idx):
                return idx
        return None

    def contains_ordinal(self, ordinal: int) -> bool:
        return self.first_ordinal <= ordinal <= self.last_ordinal


def _month_key(date: Optional[pendulum.Date]) -> Optional[tuple[int, int]]:
    if date is None:
        return None
    return (date.year, date.month)


def _date_in_year(ordinal: int, year: int) -> Optional[pendulum.Date]:
    if ordinal < 1 or ordinal > pendulum.Date.max.toordinal():
        return None
    date = pendulum.Date.fromordinal(ordinal)
    if date.year != year:
        return None
    return date


def year_layouts(year: int, week_start: WeekStart) -> list[WeekLayout]:
    """
    Week rows covering a whole year.

    The first row starts on the week-start day on or before January 1st and
    the last row is the one containing December 31st.
    """
    jan_first = make_date(year, 1, 1)
    dec_last = make_date(year, 12, 31)
    # Ordinals, since the aligned day can precede the first representable date
    aligned = jan_first.toordinal() - weekday_index(jan_first, week_start)

    layouts: list[WeekLayout] = []
    ordinal = aligned
    while ordinal <= dec_last.toordinal():
        layouts.append(WeekLayout(ordinal, year))
        ordinal += DAYS_IN_WEEK
    return layouts

