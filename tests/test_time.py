"""Tests for date string parsing and formatting."""

from __future__ import annotations

import pendulum
import pytest

from compact_calendar.exceptions import InvalidDateError
from compact_calendar.model.month_day import MonthDay
from compact_calendar.time import (
    date_from_str,
    date_or_month_day_from_str,
    date_to_display_str,
    month_day_from_str,
)


class TestDateFromStr:
    """Tests for date_from_str."""

    def test_valid(self) -> None:
        assert date_from_str("2024-02-29") == pendulum.date(2024, 2, 29)
        assert date_from_str(" 2025-12-31 ") == pendulum.date(2025, 12, 31)

    @pytest.mark.parametrize(
        "value", ["2025-02-29", "2025-13-01", "2025/01/01", "yesterday", ""]
    )
    def test_invalid(self, value: str) -> None:
        with pytest.raises(InvalidDateError) as exc_info:
            date_from_str(value)
        assert exc_info.value.value == value


class TestMonthDayFromStr:
    """Tests for month_day_from_str and the shape dispatch."""

    def test_valid(self) -> None:
        assert month_day_from_str("02-29") == MonthDay(2, 29)
        assert month_day_from_str("1-5") == MonthDay(1, 5)

    def test_invalid(self) -> None:
        with pytest.raises(InvalidDateError):
            month_day_from_str("02-30")
        with pytest.raises(InvalidDateError):
            month_day_from_str("2025-02-01")

    def test_dispatch(self) -> None:
        assert date_or_month_day_from_str("12-25") == MonthDay(12, 25)
        assert date_or_month_day_from_str("2025-12-25") == pendulum.date(2025, 12, 25)


def test_display_format() -> None:
    assert date_to_display_str(pendulum.date(2025, 3, 4)) == "03/04"
