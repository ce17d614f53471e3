# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from compact_calendar.color import Color
from compact_calendar.model.rule import Rule


class DayAnnotation(TypedDict):
    date: pendulum.Date
    color: Optional[Color]
    description: Optional[str]
    rule: Optional[Rule]
    # The description comes from a date rule and belongs in the note column
    date_noted: bool
    is_weekend: bool
    is_past: bool
    is_today: bool
    dimmed: bool
    struck: bool
