# SPDX-License-Identifier: MIT

from typing import TypedDict

from compact_calendar.model.week_start import WeekStart


class CalendarOptions(TypedDict):
    year: int
    week_start: WeekStart
    dim_weekends: bool
    work_mode: bool
    strikethrough_past: bool
    show_week_numbers: bool
