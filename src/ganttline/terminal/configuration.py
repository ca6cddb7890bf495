# SPDX-License-Identifier: MIT

from typing import Annotated, Any, Optional

import pendulum
import typer
from rich.console import Console
from rich.table import Table

from ganttline import configuration
from ganttline.repository.configuration import CONFIGURATION_REPO
from ganttline.terminal.custom_typer import ConfigTyperGroup
from ganttline.terminal.parse import parse_date
from ganttline.terminal.validate import (
    validate_alpha,
    validate_axis_label_mode,
    validate_axis_position,
    validate_line_end,
    validate_positive,
    validate_stride,
    validate_text_align,
)
from ganttline.time import date_to_iso_str

app = typer.Typer(cls=ConfigTyperGroup, no_args_is_help=True)


def _enabled(value: bool) -> str:
    return "✓ Enabled" if value else "✗ Disabled"


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()
    chart = config["chart"]

    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("config_path", str(configuration.APP_CONFIG_PATH))
    table.add_row("project_start_date", str(config["project_start_date"] or "today"))
    table.add_row("output_dpi", str(config["output_dpi"]))
    table.add_row("show_header", _enabled(config["show_header"]))
    console.print(table)

    chart_table = Table(title="Chart defaults")
    chart_table.add_column("Setting", style="cyan")
    chart_table.add_column("Value", style="magenta")
    for key, value in chart.items():
        if isinstance(value, bool):
            chart_table.add_row(key, _enabled(value))
        elif isinstance(value, list):
            chart_table.add_row(key, ", ".join(str(item) for item in value))
        else:
            chart_table.add_row(key, str(value))
    console.print(chart_table)


@app.command("set, s")
def set(
    project_start_date: Annotated[
        Optional[pendulum.Date],
        typer.Option(
            "--project-start-date",
            parser=parse_date,
            help="Default project start for month numbers (YYYY-MM or YYYY-MM-DD)",
        ),
    ] = None,
    remove_project_start_date: Annotated[
        bool,
        typer.Option(
            "--remove-project-start-date",
            help="Count month numbers from today unless --start is given",
        ),
    ] = False,
    output_dpi: Annotated[
        Optional[int], typer.Option("--output-dpi", help="Resolution of raster images")
    ] = None,
    show_header: Annotated[
        Optional[bool],
        typer.Option("--show-header/--no-show-header", help="Show the header before charts"),
    ] = None,
    month_breaks: Annotated[
        Optional[int],
        typer.Option("--month-breaks", callback=validate_stride, help="Label every n-th month"),
    ] = None,
    mark_quarters: Annotated[
        Optional[bool],
        typer.Option("--mark-quarters/--no-mark-quarters", help="Mark quarter starts"),
    ] = None,
    mark_years: Annotated[
        Optional[bool],
        typer.Option("--mark-years/--no-mark-years", help="Mark year starts"),
    ] = None,
    hide_wp: Annotated[
        Optional[bool],
        typer.Option("--hide-wp/--show-wp", help="Hide the work package lines"),
    ] = None,
    background_bands: Annotated[
        Optional[bool],
        typer.Option(
            "--background-bands/--no-background-bands",
            help="Shade alternate months",
        ),
    ] = None,
    labels: Annotated[
        Optional[str],
        typer.Option(
            "--labels",
            callback=validate_axis_label_mode,
            help="Month labels: number, date, both or none",
        ),
    ] = None,
    axis_position: Annotated[
        Optional[str],
        typer.Option(
            "--axis-position", callback=validate_axis_position, help="top or bottom"
        ),
    ] = None,
    alpha_wp: Annotated[
        Optional[float],
        typer.Option("--alpha-wp", callback=validate_alpha, help="Opacity of work packages"),
    ] = None,
    alpha_activity: Annotated[
        Optional[float],
        typer.Option(
            "--alpha-activity", callback=validate_alpha, help="Opacity of activities"
        ),
    ] = None,
    size_wp: Annotated[
        Optional[float],
        typer.Option("--size-wp", callback=validate_positive, help="Work package line size"),
    ] = None,
    size_activity: Annotated[
        Optional[float],
        typer.Option(
            "--size-activity", callback=validate_positive, help="Activity line size"
        ),
    ] = None,
    size_text_relative: Annotated[
        Optional[float],
        typer.Option(
            "--size-text-relative",
            callback=validate_positive,
            help="Scale all text, e.g. 1.5 for 50% bigger",
        ),
    ] = None,
    colours: Annotated[
        Optional[list[str]],
        typer.Option("--colour", help="Work package colours (accepts multiple)"),
    ] = None,
    colour_stripe: Annotated[
        Optional[str], typer.Option("--colour-stripe", help="Colour of the month bands")
    ] = None,
    font_family: Annotated[
        Optional[str], typer.Option("--font-family", help="Font used in images")
    ] = None,
    line_end: Annotated[
        Optional[str],
        typer.Option("--line-end", callback=validate_line_end, help="round, butt or square"),
    ] = None,
    vertical_lines: Annotated[
        Optional[bool],
        typer.Option(
            "--vertical-lines/--no-vertical-lines",
            help="Thin vertical lines at month ticks",
        ),
    ] = None,
    axis_text_align: Annotated[
        Optional[str],
        typer.Option(
            "--axis-text-align",
            callback=validate_text_align,
            help="Row label alignment: left, right or centre",
        ),
    ] = None,
    first_month_number: Annotated[
        Optional[int],
        typer.Option(
            "--first-month-number",
            help="Month number of the project start month (1, or 0 for zero-based)",
        ),
    ] = None,
    strict: Annotated[
        Optional[bool],
        typer.Option(
            "--strict/--lenient",
            help="Fail on milestones naming an unknown activity",
        ),
    ] = None,
) -> None:
    """Change configuration defaults."""
    CONFIGURATION_REPO.update_config(
        project_start_date=(
            date_to_iso_str(project_start_date)
            if project_start_date is not None
            else None
        ),
        remove_project_start_date=remove_project_start_date,
        output_dpi=output_dpi,
        show_header=show_header,
    )

    chart_options: dict[str, Any] = {
        "tick_stride_months": month_breaks,
        "mark_quarters": mark_quarters,
        "mark_years": mark_years,
        "hide_work_packages": hide_wp,
        "show_background_bands": background_bands,
        "axis_label_mode": labels,
        "axis_position": axis_position,
        "alpha_wp": alpha_wp,
        "alpha_activity": alpha_activity,
        "size_wp": size_wp,
        "size_activity": size_activity,
        "size_text_relative": size_text_relative,
        "colour_palette": colours,
        "colour_stripe": colour_stripe,
        "font_family": font_family,
        "line_end": line_end,
        "show_vertical_lines": vertical_lines,
        "axis_text_align": axis_text_align,
        "first_month_number": first_month_number,
        "strict_annotations": strict,
    }
    CONFIGURATION_REPO.update_chart_options(
        {key: value for key, value in chart_options.items() if value is not None}
    )
    CONFIGURATION_REPO.flush()

    view()


@app.command("reset")
def reset(
    yes: Annotated[
        bool, typer.Option("--yes", "-y", help="Do not ask for confirmation")
    ] = False,
) -> None:
    """Restore the default configuration."""
    if not yes:
        typer.confirm("Reset all settings to their defaults?", abort=True)
    CONFIGURATION_REPO.reset_config()
    CONFIGURATION_REPO.flush()

    view()
