# SPDX-License-Identifier: MIT

from rich.text import Text

from compact_calendar.color import HEADER_COLOR
from compact_calendar.model.week_start import WeekStart

HEADER_WIDTH = 48
TITLE_INDENT = 19
DAY_NAMES_INDENT = 14

_MONDAY_FIRST = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_SUNDAY_FIRST = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")


def day_names(week_start: WeekStart) -> tuple[str, ...]:
    if week_start == WeekStart.SUNDAY:
        return _SUNDAY_FIRST
    return _MONDAY_FIRST


def header(year: int, week_start: WeekStart) -> Text:
    """Boxed title followed by the day-of-week row.

    Args:
        year: The year shown in the title
        week_start: Decides which day heads the first column
    """
    text = Text()
    text.append(f"┌{'─' * HEADER_WIDTH}┐\n")

    title = f"COMPACT CALENDAR {year}"
    text.append("│" + " " * TITLE_INDENT)
    text.append(title, style=f"bold {HEADER_COLOR}")
    text.append(" " * (HEADER_WIDTH - TITLE_INDENT - len(title)) + "│\n")

    text.append(f"├{'─' * HEADER_WIDTH}┤\n")

    names = "  ".join(day_names(week_start))
    text.append("│" + " " * DAY_NAMES_INDENT)
    text.append(names, style="bold")
    text.append(" " * (HEADER_WIDTH - DAY_NAMES_INDENT - len(names)) + "│\n")
    return text
