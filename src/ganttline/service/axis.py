# SPDX-License-Identifier: MIT

import logging

import pendulum

from ganttline.errors import MalformedInput
from ganttline.model.axis_plan import AxisPlan, AxisTick
from ganttline.model.timeline_entry import TimelineEntry
from ganttline.time import (
    month_end,
    month_midpoint,
    month_start,
    months_between,
    year_ceiling,
    year_floor,
)

log = logging.getLogger(__name__)


def _month_boundaries(
    start: pendulum.Date, end: pendulum.Date
) -> list[pendulum.Date]:
    boundaries = []
    current = start
    while current <= end:
        boundaries.append(current)
        current = current.add(months=1)

    # Bands are drawn from pairs of boundaries, so the count must be even
    if len(boundaries) % 2 != 0:
        boundaries.append(current)

    return boundaries


def _month_ticks(
    start: pendulum.Date, end: pendulum.Date, tick_stride_months: int
) -> list[AxisTick]:
    ticks = []
    for offset in range(0, months_between(start, end) + 1, tick_stride_months):
        month = start.add(months=offset)
        ticks.append(
            AxisTick(
                date=month_midpoint(month),
                calendar_label=f"{month.format('MMM')}\n{month.format('YYYY')}",
                number_label=f"M{offset + 1}",
            )
        )
    return ticks


def _marks(
    start: pendulum.Date, end: pendulum.Date, step_months: int
) -> list[pendulum.Date]:
    marks = []
    current = year_floor(start)
    last = year_ceiling(end)
    while current <= last:
        marks.append(current)
        current = current.add(months=step_months)
    return marks


def plan_axis(
    entries: list[TimelineEntry],
    tick_stride_months: int = 1,
    mark_quarters: bool = False,
    mark_years: bool = False,
) -> AxisPlan:
    """
    Plan the background bands, month ticks and quarter/year marks of the
    time axis.

    The range is widened to whole months so exact-date timelines still get
    month-aligned bands. Ticks sit in the middle of their month and are
    numbered M1, M(1 + stride), ... from the first month of the range.

    Args:
        entries: The timeline entries to cover
        tick_stride_months: Label every n-th month
        mark_quarters: Compute quarter start marks
        mark_years: Compute year start marks

    Returns:
        The axis plan

    Raises:
        MalformedInput: If entries is empty
        ValueError: If tick_stride_months is less than 1
    """
    if not entries:
        raise MalformedInput("Cannot plan an axis for an empty timeline")
    if tick_stride_months < 1:
        raise ValueError(f"tick_stride_months must be at least 1, got {tick_stride_months}")

    start = month_start(min(entry.start for entry in entries))
    end = month_end(max(entry.end for entry in entries))

    boundaries = _month_boundaries(start, end)
    bands = tuple(
        (boundaries[i], boundaries[i + 1]) for i in range(0, len(boundaries), 2)
    )

    plan = AxisPlan(
        start=start,
        end=end,
        month_boundaries=tuple(boundaries),
        bands=bands,
        ticks=tuple(_month_ticks(start, end, tick_stride_months)),
        quarter_marks=tuple(_marks(start, end, 3)) if mark_quarters else (),
        year_marks=tuple(_marks(start, end, 12)) if mark_years else (),
    )
    log.debug(
        "Axis from %s to %s: %d bands, %d ticks",
        start,
        end,
        len(bands),
        len(plan.ticks),
    )
    return plan
