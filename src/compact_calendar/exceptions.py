# SPDX-License-Identifier: MIT

"""Errors raised while loading highlights, building rules or constructing dates."""

from pathlib import Path
from typing import Any


class CalendarError(Exception):
    """Base exception for all compact-calendar errors."""

    pass


class InvalidDateError(CalendarError):
    """Raised when a date or month-day is not valid in the Gregorian calendar."""

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(f"Invalid date: {value}")


class InvalidYearError(CalendarError):
    """Raised when a year falls outside the representable range."""

    def __init__(self, year: int) -> None:
        self.year = year
        super().__init__(f"Invalid year: {year}")


class InvalidRangeError(CalendarError):
    """Raised when an absolute range starts after it ends."""

    def __init__(self, start: Any, end: Any) -> None:
        self.start = start
        self.end = end
        super().__init__(f"Invalid range: start {start} is after end {end}")


class UnknownColorError(CalendarError):
    """Raised when a color name is not one of the supported colors."""

    def __init__(self, name: Any) -> None:
        self.name = name
        super().__init__(f"Unknown color: '{name}'")


class ConfigurationError(CalendarError):
    """Raised when the highlights file cannot be read or is malformed."""

    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"Invalid configuration in {path}: {message}")
