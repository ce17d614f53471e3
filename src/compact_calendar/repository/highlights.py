# SPDX-License-Identifier: MIT

import logging
import tomllib
from pathlib import Path
from typing import Any, Optional, TypedDict

import pendulum

from compact_calendar.color import Color, color_from_name
from compact_calendar.exceptions import ConfigurationError
from compact_calendar.model.month_day import MonthDay
from compact_calendar.model.rule import DateRule, RangeRule
from compact_calendar.time import date_or_month_day_from_str

logger = logging.getLogger(__name__)


class Highlights(TypedDict):
    ranges: list[RangeRule]
    dates: list[DateRule]


def _empty_highlights() -> Highlights:
    return {"ranges": [], "dates": []}


def _optional_str(value: Any, field: str, path: Path) -> Optional[str]:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(path, f"'{field}' must be a string, got {value!r}")
    return value if value != "" else None


def _required_str(entry: dict[str, Any], field: str, path: Path, where: str) -> str:
    value = entry.get(field)
    if not isinstance(value, str):
        raise ConfigurationError(path, f"{where}: '{field}' is required")
    return value


def _optional_color(value: Any) -> Optional[Color]:
    if value is None or value == "":
        return None
    return color_from_name(value)


def parse_date_entry(key: str, detail: Any, path: Path) -> DateRule:
    """Turn one entry of the [dates] table into a date rule."""
    if not isinstance(detail, dict):
        raise ConfigurationError(path, f"dates.{key} must be a table")

    when = date_or_month_day_from_str(key)
    color = _optional_color(detail.get("color"))
    description = _optional_str(detail.get("description"), "description", path)

    if isinstance(when, MonthDay):
        return {
            "kind": "recurring",
            "month_day": when,
            "color": color,
            "description": description,
        }
    return {
        "kind": "absolute",
        "date": when,
        "color": color,
        "description": description,
    }


def parse_range_entry(index: int, entry: Any, path: Path) -> RangeRule:
    """Turn one [[ranges]] entry into a range rule."""
    where = f"ranges[{index}]"
    if not isinstance(entry, dict):
        raise ConfigurationError(path, f"{where} must be a table")

    start = date_or_month_day_from_str(_required_str(entry, "start", path, where))
    end = date_or_month_day_from_str(_required_str(entry, "end", path, where))
    color = color_from_name(_required_str(entry, "color", path, where))
    description = _optional_str(entry.get("description"), "description", path)

    if isinstance(start, MonthDay) and isinstance(end, MonthDay):
        return {
            "kind": "recurring",
            "start": start,
            "end": end,
            "color": color,
            "description": description,
        }
    if isinstance(start, pendulum.Date) and isinstance(end, pendulum.Date):
        return {
            "kind": "absolute",
            "start": start,
            "end": end,
            "color": color,
            "description": description,
        }
    raise ConfigurationError(
        path,
        f"{where}: start and end must both be YYYY-MM-DD or both be MM-DD",
    )


def parse_highlights(data: dict[str, Any], path: Path) -> Highlights:
    """
    Convert a decoded highlights document into rule lists.

    Table order is kept, so rules stay in the order they were written.

    Args:
        data: The decoded TOML document
        path: Where the document came from, for error messages

    Returns:
        Range rules and date rules in declaration order
    """
    dates_table = data.get("dates", {})
    ranges_array = data.get("ranges", [])
    if not isinstance(dates_table, dict):
        raise ConfigurationError(path, "'dates' must be a table")
    if not isinstance(ranges_array, list):
        raise ConfigurationError(path, "'ranges' must be an array of tables")

    highlights = _empty_highlights()
    for key, detail in dates_table.items():
        highlights["dates"].append(parse_date_entry(key, detail, path))
    for index, entry in enumerate(ranges_array):
        highlights["ranges"].append(parse_range_entry(index, entry, path))
    return highlights


def load_highlights(path: Path) -> Highlights:
    """
    Read the highlights TOML file.

    A missing file is not an error: the calendar is rendered without
    highlights.

    Raises:
        ConfigurationError: If the file cannot be read or decoded
    """
    if not path.is_file():
        logger.warning("Highlights file not found at %s, using no highlights", path)
        return _empty_highlights()

    try:
        with path.open("rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(path, f"failed to parse TOML: {e}") from e
    except OSError as e:
        raise ConfigurationError(path, f"failed to read file: {e}") from e

    highlights = parse_highlights(data, path)
    logger.debug(
        "Loaded %d ranges and %d dates from %s",
        len(highlights["ranges"]),
        len(highlights["dates"]),
        path,
    )
    return highlights
