# SPDX-License-Identifier: MIT

from typing import Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from ganttline.model.chart import GanttChart
from ganttline.time import date_to_iso_str
from ganttline.view.terminal.header import header


def plan_view(
    chart: GanttChart, title: Optional[str] = None, console: Optional[Console] = None
) -> None:
    """Print the normalized rows, the axis plan and the placed milestones as tables."""
    console = console or Console()
    header(title, console)

    rows_table = Table(title="Timeline")
    rows_table.add_column("Row", justify="right")
    rows_table.add_column("Work package", style="cyan")
    rows_table.add_column("Label")
    rows_table.add_column("Kind")
    rows_table.add_column("Start")
    rows_table.add_column("End")
    for row in chart.rows:
        rows_table.add_row(
            str(row.position + 1),
            Text(row.entry.group_id, style=row.colour),
            Text(row.entry.label, style="bold" if row.bold_label else ""),
            row.entry.kind.value,
            date_to_iso_str(row.entry.start),
            date_to_iso_str(row.entry.end),
        )
    console.print(rows_table)

    axis = chart.axis
    axis_table = Table(title="Time axis", show_header=False)
    axis_table.add_column("Setting", style="cyan")
    axis_table.add_column("Value", style="magenta")
    axis_table.add_row(
        "Range", f"{date_to_iso_str(axis.start)} to {date_to_iso_str(axis.end)}"
    )
    axis_table.add_row(
        "Bands",
        ", ".join(
            f"{date_to_iso_str(band_start)}..{date_to_iso_str(band_end)}"
            for band_start, band_end in axis.bands
        ),
    )
    axis_table.add_row(
        "Ticks",
        ", ".join(
            f"{tick.number_label} {tick.calendar_label.replace(chr(10), ' ')}"
            for tick in axis.ticks
        ),
    )
    if axis.quarter_marks:
        axis_table.add_row(
            "Quarters", ", ".join(date_to_iso_str(mark) for mark in axis.quarter_marks)
        )
    if axis.year_marks:
        axis_table.add_row(
            "Years", ", ".join(date_to_iso_str(mark) for mark in axis.year_marks)
        )
    console.print(axis_table)

    if chart.annotations:
        milestones_table = Table(title="Milestones")
        milestones_table.add_column("Row", justify="right")
        milestones_table.add_column("Activity", style="cyan")
        milestones_table.add_column("Date")
        milestones_table.add_column("Milestone")
        for placed in chart.annotations:
            milestones_table.add_row(
                str(placed.position + 1),
                placed.annotation.activity_label,
                date_to_iso_str(placed.annotation.date),
                placed.annotation.text,
            )
        console.print(milestones_table)

    if chart.dropped_annotations:
        console.print(
            f"[dim]{chart.dropped_annotations} milestone row(s) dropped[/dim]"
        )
