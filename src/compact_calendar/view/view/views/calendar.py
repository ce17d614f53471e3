# SPDX-License-Identifier: MIT

import io
from typing import Optional, Sequence

import pendulum
from rich.console import Console
from rich.text import Text

from compact_calendar.color import GUTTER_COLOR, day_style, highlight_style
from compact_calendar.model.calendar_options import CalendarOptions
from compact_calendar.model.day_annotation import DayAnnotation
from compact_calendar.model.rule import RangeSpan
from compact_calendar.time import date_to_display_str
from compact_calendar.view.view.util import DAYS_IN_WEEK, WeekLayout, year_layouts
from compact_calendar.view.view.views.header import header

GUTTER_WIDTH = 13
CALENDAR_WIDTH = 34
MONTH_NAME_WIDTH = 9

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def _dashes_before(idx: int) -> int:
    """Width of the cells left of a bar placed before the day at idx."""
    return (idx - 1) * 5 + 4


def _dashes_after(idx: int) -> int:
    """Width of the cells right of a bar placed before the day at idx."""
    return (DAYS_IN_WEEK - idx) * 5 - 1


def _opening_border(layout: WeekLayout) -> str:
    # Only needed when January 1st is not in the first column
    idx = layout.month_start_idx
    if idx is None or idx == 0:
        return ""
    return (
        f"│{' ' * GUTTER_WIDTH}┌{'─' * _dashes_before(idx)}┬"
        f"{'─' * _dashes_after(idx)}┤\n"
    )


def _closing_separator(idx: int) -> str:
    """Close the previous month's cells under a row where a month starts mid-week."""
    return (
        f"│{' ' * GUTTER_WIDTH}├{'─' * _dashes_before(idx)}┘"
        f"{' ' * _dashes_after(idx)}│\n"
    )


def _opening_separator(next_layout: WeekLayout) -> str:
    """Open the next month's cells above a row where it starts."""
    idx = next_layout.month_start_idx
    if idx is None or idx == 0:
        return f"│{' ' * GUTTER_WIDTH}├{'─' * CALENDAR_WIDTH}┤\n"
    return (
        f"│{' ' * GUTTER_WIDTH}│{' ' * _dashes_before(idx)}┌"
        f"{'─' * _dashes_after(idx)}┤\n"
    )


def _bottom_border(layout: WeekLayout) -> str:
    idx = layout.first_boundary()
    if idx is None:
        return f"└{'─' * GUTTER_WIDTH}┴{'─' * CALENDAR_WIDTH}┘\n"
    return (
        f"└{'─' * GUTTER_WIDTH}┴{'─' * _dashes_before(idx)}┴"
        f"{'─' * _dashes_after(idx)}┘\n"
    )


def _append_gutter(
    text: Text, layout: WeekLayout, options: CalendarOptions
) -> None:
    text.append("│")
    if options["show_week_numbers"]:
        text.append(f"W{layout.week_number(options['week_start']):02d}", style="dim")
    else:
        text.append("   ")
    text.append(" ")

    month = layout.month_start
    if month is not None:
        text.append(
            f"{MONTH_NAMES[month - 1]:<{MONTH_NAME_WIDTH}}",
            style=f"bold {GUTTER_COLOR}",
        )
    else:
        text.append(" " * MONTH_NAME_WIDTH)
    text.append("│")


def _append_days(
    text: Text,
    layout: WeekLayout,
    annotations: dict[pendulum.Date, DayAnnotation],
) -> None:
    for idx, date in enumerate(layout.dates):
        if layout.is_boundary_before(idx):
            text.append("│")

        text.append(" ")
        if date is None:
            text.append("  ")
        elif date not in annotations:
            text.append(f"{date.day:02d}")
        else:
            annotation = annotations[date]
            text.append(
                f"{date.day:02d}",
                style=day_style(
                    annotation["color"],
                    annotation["dimmed"],
                    annotation["struck"],
                    annotation["is_today"],
                ),
            )

        if idx < DAYS_IN_WEEK - 1 and not layout.is_boundary_before(idx + 1):
            text.append("  ")
        else:
            text.append(" ")
    text.append("│")


def _append_note(
    text: Text,
    layout: WeekLayout,
    range_spans: Sequence[RangeSpan],
    shown_spans: set[int],
    details_queue: list[DayAnnotation],
) -> None:
    """
    Append at most one note after a week row.

    A range starting in this row takes priority over a queued date
    description; each range is listed once.
    """
    for idx, span in enumerate(range_spans):
        if idx in shown_spans or not layout.contains_ordinal(span["start"].toordinal()):
            continue
        rule = span["rule"]
        label = (
            f"{date_to_display_str(span['start'])} to "
            f"{date_to_display_str(span['end'])}"
        )
        if rule["description"]:
            label += f" - {rule['description']}"
        text.append(" ")
        text.append(label, style=highlight_style(rule["color"]))
        shown_spans.add(idx)
        return

    if details_queue:
        annotation = details_queue.pop(0)
        label = f"{date_to_display_str(annotation['date'])} - "
        label += annotation["description"] or ""
        text.append(" ")
        if annotation["color"] is not None:
            text.append(label, style=highlight_style(annotation["color"]))
        else:
            text.append(label)


def _queue_details(
    layout: WeekLayout,
    annotations: dict[pendulum.Date, DayAnnotation],
    details_queue: list[DayAnnotation],
) -> None:
    for date in layout.dates:
        if date is None or date not in annotations:
            continue
        if annotations[date]["date_noted"]:
            details_queue.append(annotations[date])


def render(
    year: int,
    annotations: Sequence[DayAnnotation],
    options: CalendarOptions,
    range_spans: Sequence[RangeSpan] = (),
) -> Text:
    """
    Lay out a year of annotated days as a compact grid.

    Each row is one week, with month blocks separated by box-drawing lines
    and a note column listing ranges and described dates.

    Args:
        year: The year to render
        annotations: One resolved annotation per day of the year
        options: Display options (week start, week numbers)
        range_spans: Range occurrences to list in the note column

    Returns:
        Styled text of the whole calendar, ending with a newline
    """
    by_date = {annotation["date"]: annotation for annotation in annotations}
    layouts = year_layouts(year, options["week_start"])

    text = header(year, options["week_start"])
    text.append(_opening_border(layouts[0]))

    shown_spans: set[int] = set()
    details_queue: list[DayAnnotation] = []
    next_layout: Optional[WeekLayout]

    for row, layout in enumerate(layouts):
        next_layout = layouts[row + 1] if row + 1 < len(layouts) else None

        _queue_details(layout, by_date, details_queue)
        _append_gutter(text, layout, options)
        _append_days(text, layout, by_date)
        _append_note(text, layout, range_spans, shown_spans, details_queue)
        text.append("\n")

        if next_layout is None:
            text.append(_bottom_border(layout))
        elif layout.month_start_idx is not None and layout.month_start_idx > 0:
            text.append(_closing_separator(layout.month_start_idx))
        elif next_layout.month_start_idx is not None:
            text.append(_opening_separator(next_layout))

    return text


def render_to_string(text: Text, color: bool = True) -> str:
    """Render styled text to a string, with ANSI styling unless color is False."""
    buffer = io.StringIO()
    console = Console(
        file=buffer,
        force_terminal=color,
        color_system="truecolor" if color else None,
        width=max((len(line) for line in text.plain.splitlines()), default=80),
        highlight=False,
    )
    console.print(text, soft_wrap=True, end="")
    return buffer.getvalue()
