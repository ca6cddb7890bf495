# SPDX-License-Identifier: MIT

import logging
from typing import Any, Iterable, Optional, Sequence

import pendulum

from ganttline.errors import UnmatchedReference
from ganttline.model.annotation import Annotation, SpotRow
from ganttline.model.date_mode import DateMode
from ganttline.model.timeline_entry import TimelineEntry
from ganttline.service.normalize import month_from_offset, resolve_project_start
from ganttline.time import (
    date_from_value,
    is_missing,
    month_midpoint,
    month_offset_from_value,
)

log = logging.getLogger(__name__)


def as_spot_row(row: Sequence[Any]) -> SpotRow:
    if isinstance(row, SpotRow):
        return row
    padded = list(row) + [None] * (3 - len(row))
    return SpotRow(padded[0], padded[1], padded[2])


def validate_annotation_rows(
    rows: Iterable[Sequence[Any]],
) -> tuple[list[SpotRow], int]:
    """
    Drop milestone rows with a missing activity, date or text.

    Returns:
        Tuple of (kept rows, number of dropped rows)
    """
    kept: list[SpotRow] = []
    dropped = 0
    for row in rows:
        spot = as_spot_row(row)
        if any(is_missing(value) for value in spot):
            dropped += 1
            continue
        kept.append(spot)
    if dropped:
        log.info("Dropped %d milestone rows with missing fields", dropped)
    return kept, dropped


def _spot_date(
    value: Any,
    mode: DateMode,
    project_start: Optional[pendulum.Date],
    first_month_number: int,
) -> Optional[pendulum.Date]:
    if mode is DateMode.RELATIVE_MONTH:
        offset = month_offset_from_value(value)
        if offset is None or project_start is None:
            return None
        return month_midpoint(
            month_from_offset(offset, project_start, first_month_number)
        )
    date = date_from_value(value)
    if date is None:
        return None
    if mode is DateMode.CALENDAR_MONTH:
        return month_midpoint(date)
    return date


def normalize_annotations(
    rows: Iterable[Sequence[Any]],
    entries: list[TimelineEntry],
    mode: DateMode,
    project_start_date: Any = None,
    first_month_number: int = 1,
    strict: bool = False,
) -> list[Annotation]:
    """
    Turn milestone rows into annotations placed on the timeline.

    Month based modes put the marker in the middle of its month, EXACT_DATE
    keeps the literal date. Rows with a missing or unparseable field are
    dropped. Rows naming an activity that is not on the timeline are dropped
    with a warning, or rejected when strict is set.

    Args:
        rows: Rows of (activity, date, text)
        entries: The timeline the milestones are attached to
        mode: How dates are to be read, as for the project table
        project_start_date: Start of the project for RELATIVE_MONTH tables
        first_month_number: Month number of the project start month
        strict: Raise on milestones that name an unknown activity

    Returns:
        The annotations, in input order

    Raises:
        UnmatchedReference: If strict is set and an activity is unknown
    """
    spots, _ = validate_annotation_rows(rows)
    if not spots:
        return []

    project_start = None
    if mode is DateMode.RELATIVE_MONTH:
        project_start = resolve_project_start(project_start_date)

    labels = {entry.label for entry in entries}
    annotations: list[Annotation] = []
    unparseable = 0
    for spot in spots:
        label = str(spot.activity).strip()
        date = _spot_date(spot.spot_date, mode, project_start, first_month_number)
        if date is None:
            unparseable += 1
            continue
        if label not in labels:
            if strict:
                raise UnmatchedReference(
                    f"Milestone '{spot.spot_type}' refers to unknown activity '{label}'"
                )
            log.warning(
                "Dropping milestone '%s': activity '%s' is not on the timeline",
                spot.spot_type,
                label,
            )
            continue
        annotations.append(
            Annotation(activity_label=label, date=date, text=str(spot.spot_type))
        )

    if unparseable:
        log.info("Dropped %d milestone rows with unparseable dates", unparseable)
    return annotations
