# SPDX-License-Identifier: MIT

from typing import Optional

from rich.console import Console
from rich.padding import Padding

from ganttline.view.state import get_show_header


def header(sub_header: Optional[str] = None, console: Optional[Console] = None) -> None:
    """Print the application header.

    Args:
        sub_header: Optional sub-header text to display, usually the chart title
        console: Console to print to (defaults to a new one)
    """
    # Check if headers should be shown
    if not get_show_header():
        return

    console = console or Console()
    console.print(Padding("[dark_orange]ganttline[/dark_orange]", (1, 0, 0, 1)))
    if sub_header is not None:
        console.print(Padding(f"[sandy_brown]{sub_header}[/sandy_brown]", (0, 1)))
