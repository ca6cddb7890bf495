# SPDX-License-Identifier: MIT

# Wes Anderson "Darjeeling1" palette
DEFAULT_PALETTE = [
    "#FF0000",
    "#00A08A",
    "#F2AD00",
    "#F98400",
    "#5BBCD6",
]

DEFAULT_STRIPE_COLOR = "lightgray"

QUARTER_MARK_COLOR = "#7F7F7F"
YEAR_MARK_COLOR = "#7F7F7F"
MILESTONE_COLOR = "#4D4D4D"

# Terminal equivalents of the image colours
TERMINAL_STRIPE_STYLE = "on grey23"
TERMINAL_MILESTONE_STYLE = "bold bright_white"
TERMINAL_HEADER_STYLE = "bold cyan"
TERMINAL_YEAR_STYLE = "bold yellow"


def cycle_palette(palette: list[str], count: int) -> list[str]:
    """Repeat palette until it holds count colours.

    Falls back to the default palette when palette is empty.
    """
    colors = palette or DEFAULT_PALETTE
    return [colors[i % len(colors)] for i in range(count)]
