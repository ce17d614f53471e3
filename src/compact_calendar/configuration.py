# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Optional, TypedDict

import platformdirs

APP_NAME = "compact-calendar"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

# Highlights file used when neither the command line nor config.yaml name one
DEFAULT_HIGHLIGHTS_PATH = Path("calendar.toml")


class Configuration(TypedDict):
    week_start: str
    dim_weekends: bool
    strikethrough_past: bool
    work_mode: bool
    show_week_numbers: bool
    highlights_path: Optional[str]


def default_configuration() -> Configuration:
    return {
        "week_start": "monday",
        "dim_weekends": True,
        "strikethrough_past": True,
        "work_mode": False,
        "show_week_numbers": True,
        "highlights_path": None,
    }
