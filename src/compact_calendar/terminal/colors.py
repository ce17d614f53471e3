# SPDX-License-Identifier: MIT

from rich.console import Console
from rich.table import Table
from rich.text import Text

from compact_calendar.color import Color, highlight_style


def colors() -> None:
    """List the color names accepted in the highlights file."""
    console = Console()
    table = Table()
    table.add_column("Name", style="cyan")
    table.add_column("Normal")
    table.add_column("Dimmed (weekends)")

    for color in Color:
        table.add_row(
            str(color),
            Text(f" {color} ", style=highlight_style(color)),
            Text(f" {color} ", style=highlight_style(color, dimmed=True)),
        )

    console.print(table)
