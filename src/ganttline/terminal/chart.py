# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Annotated, Any, Optional

import pendulum
import typer
from rich.console import Console

from ganttline.model.chart import GanttChart
from ganttline.model.date_mode import date_mode_from_flags
from ganttline.repository.configuration import CONFIGURATION_REPO
from ganttline.repository.table import TableRepository
from ganttline.service.chart import build_chart
from ganttline.terminal.parse import parse_columns, parse_date
from ganttline.terminal.validate import (
    validate_alpha,
    validate_axis_label_mode,
    validate_axis_position,
    validate_stride,
)
from ganttline.time import date_to_iso_str
from ganttline.view.image.gantt import render_image
from ganttline.view.terminal.gantt import gantt_view
from ganttline.view.terminal.plan import plan_view

console = Console()
err_console = Console(stderr=True)

ProjectFileArgument = Annotated[
    Path,
    typer.Argument(help="CSV, TSV or YAML file holding the project table"),
]
ByDateOption = Annotated[
    bool,
    typer.Option(
        "--by-date/--by-month-number",
        "-d",
        help="Start and end are dates (2024-03, 2024-03-01) instead of month numbers",
    ),
]
ExactDateOption = Annotated[
    bool,
    typer.Option(
        "--exact-date",
        "-x",
        help="Use dates as given instead of rounding periods to whole months",
    ),
]
StartOption = Annotated[
    Optional[pendulum.Date],
    typer.Option(
        "--start",
        "-s",
        parser=parse_date,
        help="Project start for month numbers (YYYY-MM, YYYY-MM-DD or today)",
    ),
]
ProjectColumnsOption = Annotated[
    Optional[str],
    typer.Option(
        "--columns",
        help="Project columns as 1-based positions or names, e.g. 1,2,3,4",
    ),
]
SpotColumnsOption = Annotated[
    Optional[str],
    typer.Option(
        "--spot-columns",
        help="Milestone columns (activity, date, label), e.g. 2,5,6",
    ),
]
NoSpotsOption = Annotated[
    bool, typer.Option("--no-spots", help="Ignore milestones in the table")
]
StrideOption = Annotated[
    Optional[int],
    typer.Option(
        "--month-breaks",
        "-m",
        callback=validate_stride,
        help="Label every n-th month",
    ),
]
QuartersOption = Annotated[
    Optional[bool],
    typer.Option("--mark-quarters/--no-mark-quarters", help="Mark quarter starts"),
]
YearsOption = Annotated[
    Optional[bool],
    typer.Option("--mark-years/--no-mark-years", help="Mark year starts"),
]
HideWpOption = Annotated[
    Optional[bool],
    typer.Option(
        "--hide-wp/--show-wp", help="Hide the work package lines, show activities only"
    ),
]
LabelModeOption = Annotated[
    Optional[str],
    typer.Option(
        "--labels",
        "-l",
        callback=validate_axis_label_mode,
        help="Month labels on the time axis: number, date, both or none",
    ),
]
AxisPositionOption = Annotated[
    Optional[str],
    typer.Option(
        "--axis-position",
        callback=validate_axis_position,
        help="Place the time axis at the top or bottom",
    ),
]
AlphaWpOption = Annotated[
    Optional[float],
    typer.Option("--alpha-wp", callback=validate_alpha, help="Opacity of work package lines"),
]
StrictOption = Annotated[
    Optional[bool],
    typer.Option(
        "--strict/--lenient",
        help="Fail on milestones naming an unknown activity instead of dropping them",
    ),
]


def _chart_overrides(
    month_breaks: Optional[int],
    mark_quarters: Optional[bool],
    mark_years: Optional[bool],
    hide_wp: Optional[bool],
    labels: Optional[str],
    axis_position: Optional[str],
    alpha_wp: Optional[float],
    strict: Optional[bool],
) -> dict[str, Any]:
    overrides = {
        "tick_stride_months": month_breaks,
        "mark_quarters": mark_quarters,
        "mark_years": mark_years,
        "hide_work_packages": hide_wp,
        "axis_label_mode": labels,
        "axis_position": axis_position,
        "alpha_wp": alpha_wp,
        "strict_annotations": strict,
    }
    return {key: value for key, value in overrides.items() if value is not None}


def load_chart(
    project_file: Path,
    by_date: bool,
    exact_date: bool,
    start: Optional[pendulum.Date],
    columns: Optional[str],
    spot_columns: Optional[str],
    no_spots: bool,
    overrides: dict[str, Any],
) -> GanttChart:
    """
    Read the table, merge configured and command line options and build the
    chart. Errors in the table or in configured option values are reported
    on the console and end the command.
    """
    config = CONFIGURATION_REPO.get_config()
    options: dict[str, Any] = dict(config["chart"])
    options.update(overrides)

    project_start = (
        date_to_iso_str(start) if start is not None else config["project_start_date"]
    )

    try:
        table = TableRepository(
            project_file, parse_columns(columns), parse_columns(spot_columns)
        )
        project_rows = table.get_project_rows()
        spot_rows = None if no_spots else table.get_spot_rows()
        return build_chart(
            project_rows,
            spot_rows,
            mode=date_mode_from_flags(by_date, exact_date),
            project_start_date=project_start,
            options=options,
        )
    except (ValueError, FileNotFoundError) as e:
        err_console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(code=1)


def render(
    project_file: ProjectFileArgument,
    output: Annotated[
        Path,
        typer.Argument(help="Image to write; the suffix picks the format (png, pdf, svg)"),
    ],
    by_date: ByDateOption = False,
    exact_date: ExactDateOption = False,
    start: StartOption = None,
    columns: ProjectColumnsOption = None,
    spot_columns: SpotColumnsOption = None,
    no_spots: NoSpotsOption = False,
    month_breaks: StrideOption = None,
    mark_quarters: QuartersOption = None,
    mark_years: YearsOption = None,
    hide_wp: HideWpOption = None,
    labels: LabelModeOption = None,
    axis_position: AxisPositionOption = None,
    alpha_wp: AlphaWpOption = None,
    strict: StrictOption = None,
    width: Annotated[
        float, typer.Option("--width", "-w", help="Width in inches")
    ] = 13,
    height: Annotated[
        float, typer.Option("--height", help="Height in inches")
    ] = 7.5,
    dpi: Annotated[
        Optional[int], typer.Option("--dpi", help="Resolution of raster images")
    ] = None,
) -> None:
    """Render the project timeline to an image file."""
    chart = load_chart(
        project_file,
        by_date,
        exact_date,
        start,
        columns,
        spot_columns,
        no_spots,
        _chart_overrides(
            month_breaks,
            mark_quarters,
            mark_years,
            hide_wp,
            labels,
            axis_position,
            alpha_wp,
            strict,
        ),
    )
    config = CONFIGURATION_REPO.get_config()

    try:
        written = render_image(
            chart,
            output,
            width=width,
            height=height,
            dpi=dpi if dpi is not None else config["output_dpi"],
        )
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="OUTPUT")

    console.print(f"[green]Wrote[/green] {written}")


def show(
    project_file: ProjectFileArgument,
    by_date: ByDateOption = False,
    exact_date: ExactDateOption = False,
    start: StartOption = None,
    columns: ProjectColumnsOption = None,
    spot_columns: SpotColumnsOption = None,
    no_spots: NoSpotsOption = False,
    month_breaks: StrideOption = None,
    mark_quarters: QuartersOption = None,
    mark_years: YearsOption = None,
    hide_wp: HideWpOption = None,
    labels: LabelModeOption = None,
    axis_position: AxisPositionOption = None,
    strict: StrictOption = None,
    left_width: Annotated[
        int,
        typer.Option("--left-width", "-lw", help="Width of left column for row labels"),
    ] = 30,
) -> None:
    """Display the project timeline in the terminal."""
    chart = load_chart(
        project_file,
        by_date,
        exact_date,
        start,
        columns,
        spot_columns,
        no_spots,
        _chart_overrides(
            month_breaks,
            mark_quarters,
            mark_years,
            hide_wp,
            labels,
            axis_position,
            None,
            strict,
        ),
    )
    gantt_view(chart, title=project_file.name, console=console, left_column_width=left_width)


def plan(
    project_file: ProjectFileArgument,
    by_date: ByDateOption = False,
    exact_date: ExactDateOption = False,
    start: StartOption = None,
    columns: ProjectColumnsOption = None,
    spot_columns: SpotColumnsOption = None,
    no_spots: NoSpotsOption = False,
    month_breaks: StrideOption = None,
    mark_quarters: QuartersOption = None,
    mark_years: YearsOption = None,
    hide_wp: HideWpOption = None,
    strict: StrictOption = None,
) -> None:
    """Print the normalized timeline rows and the planned time axis."""
    chart = load_chart(
        project_file,
        by_date,
        exact_date,
        start,
        columns,
        spot_columns,
        no_spots,
        _chart_overrides(
            month_breaks,
            mark_quarters,
            mark_years,
            hide_wp,
            None,
            None,
            None,
            strict,
        ),
    )
    plan_view(chart, title=project_file.name, console=console)
