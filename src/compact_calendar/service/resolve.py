# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum

from compact_calendar.color import Color
from compact_calendar.dates import days_of_year, is_weekend
from compact_calendar.model.calendar_options import CalendarOptions
from compact_calendar.model.day_annotation import DayAnnotation
from compact_calendar.model.rule import DateRule, RangeRule, Rule, is_date_rule
from compact_calendar.repository.rule_store import RuleStore


def _ranked_rules(date: pendulum.Date, rule_store: RuleStore) -> list[Rule]:
    """
    Matching rules for a date, highest precedence first.

    Tiers: absolute date, recurring date, absolute range, recurring range.
    Within a tier the rule declared last comes first.
    """
    absolute_dates: list[DateRule] = []
    recurring_dates: list[DateRule] = []
    for date_rule in rule_store.dates_matching(date):
        match date_rule["kind"]:
            case "absolute":
                absolute_dates.append(date_rule)
            case "recurring":
                recurring_dates.append(date_rule)

    absolute_ranges: list[RangeRule] = []
    recurring_ranges: list[RangeRule] = []
    for range_rule in rule_store.ranges_covering(date):
        match range_rule["kind"]:
            case "absolute":
                absolute_ranges.append(range_rule)
            case "recurring":
                recurring_ranges.append(range_rule)

    ranked: list[Rule] = []
    for tier in (absolute_dates, recurring_dates, absolute_ranges, recurring_ranges):
        ranked.extend(reversed(tier))
    return ranked


def _first_color(rules: list[Rule]) -> Optional[Color]:
    for rule in rules:
        if rule["color"] is not None:
            return rule["color"]
    return None


def _first_description(rules: list[Rule]) -> Optional[str]:
    for rule in rules:
        if rule["description"]:
            return rule["description"]
    return None


def _date_noted(rules: list[Rule]) -> bool:
    return any(is_date_rule(rule) and rule["description"] for rule in rules)


def resolve(
    date: pendulum.Date,
    rule_store: RuleStore,
    options: CalendarOptions,
    today: pendulum.Date,
) -> DayAnnotation:
    """
    Resolve the visual state of a single day.

    Args:
        date: The day to resolve
        rule_store: All highlight rules
        options: Display options (weekend dimming, work mode, strikethrough)
        today: The current date, used for past and today markers

    Returns:
        The day's annotation. Days without a matching rule have no color or
        description.
    """
    weekend = is_weekend(date)
    ranked = _ranked_rules(date, rule_store)

    # Work mode never highlights weekends, even when a rule targets them
    if options["work_mode"] and weekend:
        ranked = []

    is_past = date < today

    return {
        "date": date,
        "color": _first_color(ranked),
        "description": _first_description(ranked),
        "rule": ranked[0] if ranked else None,
        "date_noted": _date_noted(ranked),
        "is_weekend": weekend,
        "is_past": is_past,
        "is_today": date == today,
        "dimmed": weekend and options["dim_weekends"] and not options["work_mode"],
        "struck": is_past and options["strikethrough_past"],
    }


def resolve_year(
    rule_store: RuleStore,
    options: CalendarOptions,
    today: pendulum.Date,
) -> list[DayAnnotation]:
    """Resolve every day of options["year"] in date order."""
    return [
        resolve(date, rule_store, options, today)
        for date in days_of_year(options["year"])
    ]
