# SPDX-License-Identifier: MIT

from enum import StrEnum


class WeekStart(StrEnum):
    MONDAY = "monday"
    SUNDAY = "sunday"
