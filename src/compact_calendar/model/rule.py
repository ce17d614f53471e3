# SPDX-License-Identifier: MIT

from typing import Literal, Optional, TypedDict, Union

import pendulum

from compact_calendar.color import Color
from compact_calendar.model.month_day import MonthDay


class AbsoluteRange(TypedDict):
    kind: Literal["absolute"]
    start: pendulum.Date
    end: pendulum.Date
    color: Color
    description: Optional[str]


class RecurringRange(TypedDict):
    kind: Literal["recurring"]
    start: MonthDay
    end: MonthDay
    color: Color
    description: Optional[str]


class AbsoluteDate(TypedDict):
    kind: Literal["absolute"]
    date: pendulum.Date
    color: Optional[Color]
    description: Optional[str]


class RecurringDate(TypedDict):
    kind: Literal["recurring"]
    month_day: MonthDay
    color: Optional[Color]
    description: Optional[str]


RangeRule = Union[AbsoluteRange, RecurringRange]
DateRule = Union[AbsoluteDate, RecurringDate]
Rule = Union[RangeRule, DateRule]


class RangeSpan(TypedDict):
    start: pendulum.Date
    end: pendulum.Date
    rule: RangeRule


def is_date_rule(rule: Rule) -> bool:
    return "date" in rule or "month_day" in rule
