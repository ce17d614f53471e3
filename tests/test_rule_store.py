"""Tests for the rule store."""

from __future__ import annotations

from typing import Optional

import pendulum
import pytest

from compact_calendar.color import Color
from compact_calendar.exceptions import InvalidRangeError, UnknownColorError
from compact_calendar.model.month_day import MonthDay
from compact_calendar.model.rule import (
    AbsoluteDate,
    AbsoluteRange,
    RecurringDate,
    RecurringRange,
)
from compact_calendar.repository.rule_store import build_rule_store


def absolute_range(
    start: pendulum.Date, end: pendulum.Date, color: str = "blue"
) -> AbsoluteRange:
    return {
        "kind": "absolute",
        "start": start,
        "end": end,
        "color": color,  # type: ignore[typeddict-item]
        "description": None,
    }


def recurring_range(
    start: MonthDay, end: MonthDay, color: str = "blue"
) -> RecurringRange:
    return {
        "kind": "recurring",
        "start": start,
        "end": end,
        "color": color,  # type: ignore[typeddict-item]
        "description": None,
    }


def absolute_date(date: pendulum.Date, color: Optional[str] = "red") -> AbsoluteDate:
    return {
        "kind": "absolute",
        "date": date,
        "color": color,  # type: ignore[typeddict-item]
        "description": None,
    }


def recurring_date(month_day: MonthDay, color: Optional[str] = "red") -> RecurringDate:
    return {
        "kind": "recurring",
        "month_day": month_day,
        "color": color,  # type: ignore[typeddict-item]
        "description": None,
    }


def winter_holidays() -> RecurringRange:
    return recurring_range(MonthDay(12, 20), MonthDay(1, 5))


class TestBuildRuleStore:
    """Tests for build_rule_store validation."""

    def test_backwards_absolute_range(self) -> None:
        start, end = pendulum.date(2025, 3, 10), pendulum.date(2025, 3, 1)
        with pytest.raises(InvalidRangeError) as exc_info:
            build_rule_store([absolute_range(start, end)], [])
        assert exc_info.value.start == start
        assert exc_info.value.end == end

    def test_wrapping_recurring_range_is_valid(self) -> None:
        store = build_rule_store([winter_holidays()], [])
        assert len(store.range_rules) == 1

    def test_unknown_color(self) -> None:
        with pytest.raises(UnknownColorError):
            build_rule_store([], [absolute_date(pendulum.date(2025, 1, 1), "magenta")])

    def test_colors_normalized(self) -> None:
        store = build_rule_store(
            [
                absolute_range(
                    pendulum.date(2025, 1, 1), pendulum.date(2025, 1, 2), "Light_Blue"
                )
            ],
            [absolute_date(pendulum.date(2025, 1, 1), None)],
        )
        assert store.range_rules[0]["color"] is Color.LIGHT_BLUE
        assert store.date_rules[0]["color"] is None

    def test_empty(self) -> None:
        store = build_rule_store([], [])
        assert store.ranges_covering(pendulum.date(2025, 1, 1)) == []
        assert store.dates_matching(pendulum.date(2025, 1, 1)) == []
        assert store.range_spans(2025) == []


class TestQueries:
    """Tests for ranges_covering and dates_matching."""

    def test_absolute_range_is_inclusive(self) -> None:
        store = build_rule_store(
            [absolute_range(pendulum.date(2025, 3, 10), pendulum.date(2025, 3, 14))], []
        )
        assert store.ranges_covering(pendulum.date(2025, 3, 10))
        assert store.ranges_covering(pendulum.date(2025, 3, 14))
        assert not store.ranges_covering(pendulum.date(2025, 3, 9))
        assert not store.ranges_covering(pendulum.date(2025, 3, 15))
        assert not store.ranges_covering(pendulum.date(2024, 3, 12))

    def test_recurring_range_matches_every_year(self) -> None:
        store = build_rule_store(
            [recurring_range(MonthDay(12, 25), MonthDay(12, 31))], []
        )
        assert store.ranges_covering(pendulum.date(2024, 12, 25))
        assert store.ranges_covering(pendulum.date(2023, 12, 28))
        assert not store.ranges_covering(pendulum.date(2024, 1, 1))

    def test_wrapping_recurring_range(self) -> None:
        store = build_rule_store([winter_holidays()], [])
        assert store.ranges_covering(pendulum.date(2024, 12, 25))
        assert store.ranges_covering(pendulum.date(2025, 1, 2))
        assert not store.ranges_covering(pendulum.date(2025, 1, 6))
        assert not store.ranges_covering(pendulum.date(2024, 12, 19))

    def test_dates_matching(self) -> None:
        store = build_rule_store(
            [],
            [
                absolute_date(pendulum.date(2025, 3, 14)),
                recurring_date(MonthDay(3, 14), "green"),
                absolute_date(pendulum.date(2024, 3, 14), "blue"),
            ],
        )
        matching = store.dates_matching(pendulum.date(2025, 3, 14))
        assert [rule["color"] for rule in matching] == [Color.RED, Color.GREEN]
        assert store.dates_matching(pendulum.date(2025, 3, 15)) == []

    def test_leap_day_only_matches_leap_years(self) -> None:
        store = build_rule_store([], [recurring_date(MonthDay(2, 29))])
        assert store.dates_matching(pendulum.date(2024, 2, 29))
        assert not store.dates_matching(pendulum.date(2025, 2, 28))
        assert not store.dates_matching(pendulum.date(2025, 3, 1))

    def test_declaration_order_kept(self) -> None:
        start, end = pendulum.date(2025, 5, 1), pendulum.date(2025, 5, 31)
        store = build_rule_store(
            [
                absolute_range(start, end, "red"),
                absolute_range(start, end, "green"),
                absolute_range(start, end, "blue"),
            ],
            [],
        )
        covering = store.ranges_covering(pendulum.date(2025, 5, 15))
        assert [rule["color"] for rule in covering] == [
            Color.RED,
            Color.GREEN,
            Color.BLUE,
        ]


class TestRangeSpans:
    """Tests for range_spans."""

    def test_absolute_span(self) -> None:
        start, end = pendulum.date(2025, 6, 2), pendulum.date(2025, 6, 13)
        store = build_rule_store([absolute_range(start, end)], [])
        spans = store.range_spans(2025)
        assert [(span["start"], span["end"]) for span in spans] == [(start, end)]

    def test_wrapping_recurring_span(self) -> None:
        store = build_rule_store([winter_holidays()], [])
        spans = store.range_spans(2025)
        assert [(span["start"], span["end"]) for span in spans] == [
            (pendulum.date(2024, 12, 20), pendulum.date(2025, 1, 5)),
            (pendulum.date(2025, 12, 20), pendulum.date(2026, 1, 5)),
        ]

    def test_leap_day_start_skipped_in_common_years(self) -> None:
        store = build_rule_store(
            [recurring_range(MonthDay(2, 29), MonthDay(3, 2))], []
        )
        spans = store.range_spans(2025)
        assert [(span["start"], span["end"]) for span in spans] == [
            (pendulum.date(2024, 2, 29), pendulum.date(2024, 3, 2)),
        ]

    def test_leap_day_end_clamped(self) -> None:
        store = build_rule_store(
            [recurring_range(MonthDay(2, 20), MonthDay(2, 29))], []
        )
        spans = store.range_spans(2025)
        assert spans[-1]["end"] == pendulum.date(2025, 2, 28)

    def test_first_year_has_no_previous_occurrence(self) -> None:
        store = build_rule_store([winter_holidays()], [])
        spans = store.range_spans(1)
        assert [span["start"] for span in spans] == [pendulum.date(1, 12, 20)]
