# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from typing import Any, Optional

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from compact_calendar import configuration
from compact_calendar.exceptions import ConfigurationError
from compact_calendar.model.week_start import WeekStart

logger = logging.getLogger(__name__)

_FLAGS = (
    "dim_weekends",
    "strikethrough_past",
    "work_mode",
    "show_week_numbers",
)


def _validate(config: dict[str, Any]) -> None:
    path = configuration.APP_CONFIG_PATH
    week_starts = [str(week_start) for week_start in WeekStart]
    if config["week_start"] not in week_starts:
        raise ConfigurationError(
            path,
            f"'week_start' must be one of {', '.join(week_starts)}, "
            f"got {config['week_start']!r}",
        )
    for flag in _FLAGS:
        if not isinstance(config[flag], bool):
            raise ConfigurationError(
                path, f"'{flag}' must be true or false, got {config[flag]!r}"
            )
    highlights_path = config["highlights_path"]
    if highlights_path is not None and not isinstance(highlights_path, str):
        raise ConfigurationError(
            path, f"'highlights_path' must be a string, got {highlights_path!r}"
        )


class ConfigurationRepository:
    def __init__(self) -> None:
        self._config: Optional[configuration.Configuration] = None
        self.is_dirty = False

    @property
    def config(self) -> configuration.Configuration:
        if self._config is None:
            self.__load_data()
        if self._config is None:
            raise ValueError()
        return self._config

    def __load_data(self) -> None:
        defaults = configuration.default_configuration()

        if not configuration.APP_CONFIG_PATH.is_file():
            logger.debug(
                "No configuration at %s, using defaults",
                configuration.APP_CONFIG_PATH,
            )
            self._config = defaults
            return

        loaded = load(configuration.APP_CONFIG_PATH.read_text(), Loader=Loader)
        if loaded is None:
            loaded = {}
        if not isinstance(loaded, dict):
            raise ConfigurationError(configuration.APP_CONFIG_PATH, "not a mapping")

        # Fill settings added after the file was written
        for key, value in defaults.items():
            if key not in loaded:
                loaded[key] = value
        _validate(loaded)
        self._config = loaded  # type: ignore[assignment]

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)
        configuration.APP_CONFIG_PATH.write_text(dump(dict(config), Dumper=Dumper))

    def flush(self) -> None:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(
        self,
        week_start: Optional[WeekStart] = None,
        dim_weekends: Optional[bool] = None,
        strikethrough_past: Optional[bool] = None,
        work_mode: Optional[bool] = None,
        show_week_numbers: Optional[bool] = None,
        highlights_path: Optional[str] = None,
        remove_highlights_path: bool = False,
    ) -> None:
        self.is_dirty = True

        if week_start is not None:
            self.config["week_start"] = str(week_start)
        if dim_weekends is not None:
            self.config["dim_weekends"] = dim_weekends
        if strikethrough_past is not None:
            self.config["strikethrough_past"] = strikethrough_past
        if work_mode is not None:
            self.config["work_mode"] = work_mode
        if show_week_numbers is not None:
            self.config["show_week_numbers"] = show_week_numbers
        if highlights_path is not None:
            self.config["highlights_path"] = highlights_path
        if remove_highlights_path:
            self.config["highlights_path"] = None


CONFIGURATION_REPO = ConfigurationRepository()
