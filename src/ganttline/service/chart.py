# SPDX-License-Identifier: MIT

import logging
from typing import Any, Iterable, Optional, Sequence

from ganttline.color import cycle_palette
from ganttline.model.annotation import PlacedAnnotation
from ganttline.model.chart import ChartOptions, ChartRow, GanttChart
from ganttline.model.date_mode import DateMode
from ganttline.model.timeline_entry import TimelineEntry
from ganttline.service.aggregate import aggregate
from ganttline.service.annotation import normalize_annotations
from ganttline.service.axis import plan_axis
from ganttline.service.normalize import normalize
from ganttline.template.chart_options import get_chart_options_template

log = logging.getLogger(__name__)


def merge_chart_options(options: Optional[dict[str, Any]] = None) -> ChartOptions:
    """Fill in defaults for any option not given."""
    chart_options = get_chart_options_template()
    if options:
        unknown = set(options) - set(chart_options)
        if unknown:
            raise ValueError(f"Unknown chart options: {', '.join(sorted(unknown))}")
        chart_options.update(options)  # type: ignore[typeddict-item]
    return chart_options


def assign_positions(timeline: list[TimelineEntry]) -> dict[str, int]:
    """Give every distinct label a row, top to bottom in timeline order."""
    positions: dict[str, int] = {}
    for entry in timeline:
        if entry.label not in positions:
            positions[entry.label] = len(positions)
    return positions


def build_chart(
    project_rows: Iterable[Sequence[Any]],
    spot_rows: Optional[Iterable[Sequence[Any]]] = None,
    mode: DateMode = DateMode.RELATIVE_MONTH,
    project_start_date: Any = None,
    options: Optional[dict[str, Any]] = None,
) -> GanttChart:
    """
    Run the whole pipeline and produce a chart ready for a renderer.

    Args:
        project_rows: Rows of (work package, activity, start, end)
        spot_rows: Optional rows of (activity, date, text) milestones
        mode: How dates in both tables are to be read
        project_start_date: Start of the project for RELATIVE_MONTH tables
        options: Chart options overriding the defaults

    Returns:
        The chart: rows with their positions and styling, the axis plan and
        the placed milestones
    """
    chart_options = merge_chart_options(options)

    entries = normalize(
        project_rows,
        mode,
        project_start_date=project_start_date,
        first_month_number=chart_options["first_month_number"],
    )
    # The axis always covers the work packages, even when they are hidden
    timeline = aggregate(entries)
    axis = plan_axis(
        timeline,
        tick_stride_months=chart_options["tick_stride_months"],
        mark_quarters=chart_options["mark_quarters"],
        mark_years=chart_options["mark_years"],
    )

    visible = aggregate(entries, hide_work_packages=chart_options["hide_work_packages"])
    positions = assign_positions(visible)

    group_ids = list(dict.fromkeys(entry.group_id for entry in timeline))
    colours = dict(
        zip(group_ids, cycle_palette(chart_options["colour_palette"], len(group_ids)))
    )

    rows = [
        ChartRow(
            entry=entry,
            position=positions[entry.label],
            alpha=(
                chart_options["alpha_wp"]
                if entry.is_work_package
                else chart_options["alpha_activity"]
            ),
            bold_label=entry.is_work_package,
            colour=colours[entry.group_id],
        )
        for entry in visible
    ]

    placed: list[PlacedAnnotation] = []
    dropped = 0
    if spot_rows is not None:
        spot_list = list(spot_rows)
        annotations = normalize_annotations(
            spot_list,
            visible,
            mode,
            project_start_date=project_start_date,
            first_month_number=chart_options["first_month_number"],
            strict=chart_options["strict_annotations"],
        )
        placed = [
            PlacedAnnotation(annotation, positions[annotation.activity_label])
            for annotation in annotations
        ]
        dropped = len(spot_list) - len(annotations)

    log.info(
        "Built chart with %d rows, %d milestones (%d dropped)",
        len(rows),
        len(placed),
        dropped,
    )
    return GanttChart(
        rows=rows,
        axis=axis,
        annotations=placed,
        options=chart_options,
        dropped_annotations=dropped,
    )
