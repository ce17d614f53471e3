# SPDX-License-Identifier: MIT

from compact_calendar.cleanup import register_cleanup
from compact_calendar.initialize import initialize
from compact_calendar.terminal.app import run


def main() -> None:
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
