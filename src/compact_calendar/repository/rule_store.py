# SPDX-License-Identifier: MIT

import logging
from typing import Iterable, Optional

import pendulum

from compact_calendar.color import color_from_name
from compact_calendar.dates import (
    MAX_YEAR,
    MIN_YEAR,
    is_leap_year,
    make_date,
    month_day_in_range,
    month_day_of,
)
from compact_calendar.exceptions import InvalidRangeError
from compact_calendar.model.month_day import MonthDay
from compact_calendar.model.rule import (
    AbsoluteDate,
    AbsoluteRange,
    DateRule,
    RangeRule,
    RangeSpan,
    RecurringDate,
    RecurringRange,
)

logger = logging.getLogger(__name__)


class RuleStore:
    """Read-only collection of highlight rules in declaration order.

    Queries scan every rule; precedence between overlapping rules is left to
    the caller.
    """

    def __init__(
        self, range_rules: list[RangeRule], date_rules: list[DateRule]
    ) -> None:
        self._range_rules = tuple(range_rules)
        self._date_rules = tuple(date_rules)

    @property
    def range_rules(self) -> tuple[RangeRule, ...]:
        return self._range_rules

    @property
    def date_rules(self) -> tuple[DateRule, ...]:
        return self._date_rules

    def ranges_covering(self, date: pendulum.Date) -> list[RangeRule]:
        covering: list[RangeRule] = []
        month_day = month_day_of(date)
        for rule in self._range_rules:
            match rule["kind"]:
                case "absolute":
                    if rule["start"] <= date <= rule["end"]:
                        covering.append(rule)
                case "recurring":
                    if month_day_in_range(month_day, rule["start"], rule["end"]):
                        covering.append(rule)
        return covering

    def dates_matching(self, date: pendulum.Date) -> list[DateRule]:
        matching: list[DateRule] = []
        month_day = month_day_of(date)
        for rule in self._date_rules:
            match rule["kind"]:
                case "absolute":
                    if rule["date"] == date:
                        matching.append(rule)
                case "recurring":
                    if rule["month_day"] == month_day:
                        matching.append(rule)
        return matching

    def range_spans(self, year: int) -> list[RangeSpan]:
        """
        Dated occurrences of every range rule around a year.

        Absolute ranges are returned as declared. Recurring ranges are
        instantiated for the previous year and the given year, so a span that
        wraps over New Year into the given year is included too.

        Args:
            year: The year being rendered

        Returns:
            Spans in declaration order, then by occurrence year
        """
        spans: list[RangeSpan] = []
        for rule in self._range_rules:
            match rule["kind"]:
                case "absolute":
                    spans.append(
                        {"start": rule["start"], "end": rule["end"], "rule": rule}
                    )
                case "recurring":
                    for occurrence_year in (year - 1, year):
                        span = _recurring_span(rule, occurrence_year)
                        if span is not None:
                            spans.append(span)
        return spans


def _date_in_year(year: int, month_day: MonthDay) -> Optional[pendulum.Date]:
    if month_day == MonthDay(2, 29) and not is_leap_year(year):
        return None
    return make_date(year, month_day.month, month_day.day)


def _recurring_span(rule: RecurringRange, year: int) -> Optional[RangeSpan]:
    end_year = year + 1 if rule["end"] < rule["start"] else year
    if year < MIN_YEAR or end_year > MAX_YEAR:
        return None

    start = _date_in_year(year, rule["start"])
    if start is None:
        return None
    end = _date_in_year(end_year, rule["end"])
    if end is None:
        end = make_date(end_year, 2, 28)
    return {"start": start, "end": end, "rule": rule}


def _normalize_range(rule: RangeRule) -> RangeRule:
    color = color_from_name(rule["color"])
    match rule["kind"]:
        case "absolute":
            if rule["start"] > rule["end"]:
                raise InvalidRangeError(rule["start"], rule["end"])
            absolute: AbsoluteRange = {
                "kind": "absolute",
                "start": rule["start"],
                "end": rule["end"],
                "color": color,
                "description": rule["description"],
            }
            return absolute
        case "recurring":
            recurring: RecurringRange = {
                "kind": "recurring",
                "start": rule["start"],
                "end": rule["end"],
                "color": color,
                "description": rule["description"],
            }
            return recurring


def _normalize_date(rule: DateRule) -> DateRule:
    color = color_from_name(rule["color"]) if rule["color"] is not None else None
    match rule["kind"]:
        case "absolute":
            absolute: AbsoluteDate = {
                "kind": "absolute",
                "date": rule["date"],
                "color": color,
                "description": rule["description"],
            }
            return absolute
        case "recurring":
            recurring: RecurringDate = {
                "kind": "recurring",
                "month_day": rule["month_day"],
                "color": color,
                "description": rule["description"],
            }
            return recurring


def build_rule_store(
    range_rules: Iterable[RangeRule], date_rules: Iterable[DateRule]
) -> RuleStore:
    """
    Validate rules and freeze them into a RuleStore.

    Colors given as names are converted to Color members.

    Raises:
        InvalidRangeError: If an absolute range starts after it ends
        UnknownColorError: If a rule names an unsupported color
    """
    ranges = [_normalize_range(rule) for rule in range_rules]
    dates = [_normalize_date(rule) for rule in date_rules]
    logger.debug(
        "Built rule store with %d ranges and %d dates", len(ranges), len(dates)
    )
    return RuleStore(ranges, dates)
