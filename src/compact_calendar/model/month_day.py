# SPDX-License-Identifier: MIT

from typing import NamedTuple


class MonthDay(NamedTuple):
    """A month and day without a year, ordered by (month, day)."""

    month: int
    day: int

    def __str__(self) -> str:
        return f"{self.month:02d}-{self.day:02d}"
