# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum
from rich.console import Console
from rich.padding import Padding
from rich.table import Table
from rich.text import Text

from ganttline.color import (
    TERMINAL_HEADER_STYLE,
    TERMINAL_MILESTONE_STYLE,
    TERMINAL_STRIPE_STYLE,
    TERMINAL_YEAR_STYLE,
)
from ganttline.model.chart import ChartRow, GanttChart, TextAlign
from ganttline.time import date_to_display_str, months_between
from ganttline.view.terminal.header import header

SLOT_WIDTH = 3


def gantt_view(
    chart: GanttChart,
    title: Optional[str] = None,
    console: Optional[Console] = None,
    left_column_width: int = 30,
) -> None:
    """
    Print a chart as a month-by-month timeline in the terminal.

    Each month is a three character slot. Alternate months are shaded the way
    the image background bands are, work packages use a heavy line and
    activities a light one, and milestones show as a diamond in their month
    with a legend underneath.

    Args:
        chart: The chart to display
        title: Optional title shown in the header
        console: Console to print to (defaults to a new one)
        left_column_width: Width of the left column for row labels
    """
    console = console or Console()
    header(title, console)

    options = chart.options
    time_slots = _generate_time_slots(chart.axis.start, chart.axis.end)
    shaded = _shaded_slots(chart, time_slots)

    date_range_str = (
        f"{chart.axis.start.format('YYYY-MM-DD')} to {chart.axis.end.format('YYYY-MM-DD')}"
    )
    console.print(f"\n[bold]{date_range_str}[/bold]\n")

    header_rows = _build_date_header(chart, time_slots, shaded, left_column_width)

    chart_elements: list[Text] = []
    if options["axis_position"] == "top":
        chart_elements.extend(header_rows)

    separator = Text("─" * left_column_width, style="dim")
    for i in range(len(time_slots)):
        style = "dim " + TERMINAL_STRIPE_STYLE if i in shaded else "dim"
        separator.append("─" * SLOT_WIDTH, style=style)
    chart_elements.append(separator)

    rows_by_position: dict[int, list[ChartRow]] = {}
    for row in chart.rows:
        rows_by_position.setdefault(row.position, []).append(row)

    for position in sorted(rows_by_position):
        chart_elements.append(
            _build_timeline_row(
                chart,
                position,
                rows_by_position[position],
                time_slots,
                shaded,
                left_column_width,
            )
        )

    if options["axis_position"] == "bottom":
        chart_elements.append(separator)
        chart_elements.extend(header_rows)

    for element in chart_elements:
        console.print(element, no_wrap=True, overflow="crop")

    if chart.annotations:
        console.print()
        console.print(Padding(_build_milestone_legend(chart), (0, 0, 0, 1)))

    if chart.dropped_annotations:
        console.print(
            f"\n[dim]{chart.dropped_annotations} milestone(s) could not be placed[/dim]"
        )
    console.print()


def _generate_time_slots(
    start: pendulum.Date, end: pendulum.Date
) -> list[pendulum.Date]:
    return [start.add(months=offset) for offset in range(months_between(start, end) + 1)]


def _shaded_slots(chart: GanttChart, time_slots: list[pendulum.Date]) -> set[int]:
    if not chart.options["show_background_bands"]:
        return set()
    band_starts = {band_start for band_start, _ in chart.axis.bands}
    return {i for i, slot in enumerate(time_slots) if slot in band_starts}


def _slot_index(slot_dates: list[pendulum.Date], date: pendulum.Date) -> Optional[int]:
    for i, slot in enumerate(slot_dates):
        if slot.year == date.year and slot.month == date.month:
            return i
    return None


def _align(text: str, width: int, align: TextAlign) -> str:
    if len(text) > width:
        return text[: width - 3] + "..."
    if align == "left":
        return text.ljust(width)
    if align in ("centre", "center"):
        return text.center(width)
    return text.rjust(width)


def _build_date_header(
    chart: GanttChart,
    time_slots: list[pendulum.Date],
    shaded: set[int],
    left_column_width: int,
) -> list[Text]:
    """
    Build the header rows for the label mode of the chart.

    "date" gives a year row and a month row, "number" a row of month numbers
    (M1, M2, ...), "both" all three and "none" nothing. Only months that
    carry a tick get a label.
    """
    label_mode = chart.options["axis_label_mode"]
    if label_mode == "none":
        return []

    ticks = {
        _slot_index(time_slots, tick.date): tick
        for tick in chart.axis.ticks
    }
    rows: list[Text] = []

    if label_mode in ("date", "both"):
        year_row = Text(" " * left_column_width)
        prev_year: Optional[int] = None
        for i, slot in enumerate(time_slots):
            if i in ticks and slot.year != prev_year:
                year_row.append(slot.format("YY").center(SLOT_WIDTH), style=TERMINAL_YEAR_STYLE)
                prev_year = slot.year
            else:
                year_row.append(" " * SLOT_WIDTH)
        rows.append(year_row)

        month_row = Text(" " * left_column_width)
        for i, slot in enumerate(time_slots):
            bg_style = " " + TERMINAL_STRIPE_STYLE if i in shaded else ""
            if i in ticks:
                month_row.append(slot.format("MMM"), style=TERMINAL_HEADER_STYLE + bg_style)
            else:
                month_row.append(" " * SLOT_WIDTH, style=bg_style.strip())
        rows.append(month_row)

    if label_mode in ("number", "both"):
        number_row = Text(" " * left_column_width)
        for i in range(len(time_slots)):
            bg_style = " " + TERMINAL_STRIPE_STYLE if i in shaded else ""
            if i in ticks:
                label = ticks[i].number_label
                if len(label) > SLOT_WIDTH:
                    # M100 and up: drop the prefix to fit the slot
                    label = label[1:]
                number_row.append(
                    label[:SLOT_WIDTH].ljust(SLOT_WIDTH), style="bold" + bg_style
                )
            else:
                number_row.append(" " * SLOT_WIDTH, style=bg_style.strip())
        rows.append(number_row)

    return rows


def _build_timeline_row(
    chart: GanttChart,
    position: int,
    rows: list[ChartRow],
    time_slots: list[pendulum.Date],
    shaded: set[int],
    left_column_width: int,
) -> Text:
    """
    Build one line of the chart: the row label followed by one slot per month.

    Several chart rows can share a position when an activity has the same
    name as another row; their bars are drawn on the same line.
    """
    options = chart.options
    first = rows[0]

    line = Text()
    label_style = "bold" if first.bold_label else ""
    line.append(
        _align(first.entry.label, left_column_width - 1, options["axis_text_align"]) + " ",
        style=label_style,
    )

    milestone_slots = {
        _slot_index(time_slots, placed.annotation.date)
        for placed in chart.annotations
        if placed.position == position
    }
    quarter_marks = set(chart.axis.quarter_marks)
    year_marks = set(chart.axis.year_marks)

    for i, slot in enumerate(time_slots):
        bg_style = " " + TERMINAL_STRIPE_STYLE if i in shaded else ""
        slot_end = slot.end_of("month")

        if i in milestone_slots:
            line.append(
                " ◆ ", style=TERMINAL_MILESTONE_STYLE + bg_style
            )
            continue

        covering = [
            row for row in rows if row.entry.start <= slot_end and row.entry.end >= slot
        ]
        if not covering:
            if slot in year_marks:
                line.append("┃  ", style="grey50" + bg_style)
            elif slot in quarter_marks:
                line.append("│  ", style="grey50" + bg_style)
            else:
                line.append(" " * SLOT_WIDTH, style=bg_style.strip())
            continue

        row = covering[0]
        char = "━" if row.entry.is_work_package else "─"
        style = row.colour
        if row.bold_label:
            style = "bold " + style
        if row.alpha < 0.5:
            style = "dim " + style

        is_start = row.entry.start >= slot
        is_end = row.entry.end <= slot_end
        if is_start and is_end:
            cell = "●" * SLOT_WIDTH
        elif is_start:
            cell = "◄" + char * (SLOT_WIDTH - 1)
        elif is_end:
            cell = char * (SLOT_WIDTH - 1) + "►"
        else:
            cell = char * SLOT_WIDTH
        line.append(cell, style=style + bg_style)

    return line


def _build_milestone_legend(chart: GanttChart) -> Table:
    table = Table(show_header=True, header_style="bold", box=None)
    table.add_column("")
    table.add_column("Milestone")
    table.add_column("Activity", style="cyan")
    table.add_column("Date")
    for placed in sorted(chart.annotations, key=lambda placed: placed.annotation.date):
        annotation = placed.annotation
        table.add_row(
            Text("◆", style=TERMINAL_MILESTONE_STYLE),
            annotation.text,
            annotation.activity_label,
            date_to_display_str(annotation.date),
        )
    return table
