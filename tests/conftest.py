"""Shared fixtures for compact-calendar tests."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

import pendulum
import pytest

from compact_calendar import configuration
from compact_calendar.model.calendar_options import CalendarOptions
from compact_calendar.model.week_start import WeekStart
from compact_calendar.repository.configuration import CONFIGURATION_REPO


@pytest.fixture
def options() -> CalendarOptions:
    """Default display options for 2025."""
    return {
        "year": 2025,
        "week_start": WeekStart.MONDAY,
        "dim_weekends": True,
        "work_mode": False,
        "strikethrough_past": True,
        "show_week_numbers": True,
    }


@pytest.fixture
def today() -> pendulum.Date:
    return pendulum.date(2025, 6, 15)


@pytest.fixture
def config_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the application configuration at a temporary directory."""
    config_path = tmp_path / "config"
    monkeypatch.setattr(configuration, "CONFIG_PATH", config_path)
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", config_path / "config.yaml")
    monkeypatch.setattr(CONFIGURATION_REPO, "_config", None)
    monkeypatch.setattr(CONFIGURATION_REPO, "is_dirty", False)
    return config_path


@pytest.fixture(autouse=True)
def reset_package_logger() -> Iterator[None]:
    """Undo the handler installed by the CLI callback."""
    yield
    package_logger = logging.getLogger("compact_calendar")
    package_logger.handlers = []
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True


@pytest.fixture
def highlights_file(tmp_path: Path) -> Path:
    """A highlights file with every kind of rule."""
    path = tmp_path / "calendar.toml"
    path.write_text(
        """
[dates]
"2025-03-14" = { description = "Pi day", color = "red" }
"12-25" = { description = "Christmas", color = "green" }
"2025-09-30" = { description = "Report due" }

[[ranges]]
start = "2025-06-02"
end = "2025-06-13"
color = "blue"
description = "Sprint"

[[ranges]]
start = "12-20"
end = "01-05"
color = "light_gray"
description = "Holidays"
"""
    )
    return path
