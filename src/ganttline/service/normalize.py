# SPDX-License-Identifier: MIT

import logging
from typing import Any, Callable, Iterable, Optional, Sequence

import pendulum

from ganttline.errors import MalformedInput, UnparseableDate
from ganttline.model.date_mode import DateMode
from ganttline.model.timeline_entry import EntryKind, ProjectRow, TimelineEntry
from ganttline.time import (
    date_from_value,
    is_missing,
    month_end,
    month_offset_from_value,
    month_start,
    today,
)

log = logging.getLogger(__name__)

BoundParser = Callable[[Any], Optional[pendulum.Date]]


def as_project_row(row: Sequence[Any]) -> ProjectRow:
    if isinstance(row, ProjectRow):
        return row
    if len(row) < 4:
        raise MalformedInput(
            f"Project rows need 4 fields (work package, activity, start, end), got {len(row)}"
        )
    return ProjectRow(row[0], row[1], row[2], row[3])


def resolve_project_start(project_start_date: Any) -> pendulum.Date:
    """Parse the project start date, defaulting to today when it is not given."""
    if is_missing(project_start_date):
        start = today()
        log.info("No project start date given, months are counted from %s", start)
        return start
    start = date_from_value(project_start_date)
    if start is None:
        raise MalformedInput(f"Cannot parse project start date {project_start_date!r}")
    return start


def month_from_offset(
    offset: int, project_start: pendulum.Date, first_month_number: int = 1
) -> pendulum.Date:
    """
    Return the first day of the month that month number offset refers to.

    first_month_number is the number of the project start month: with the
    default of 1, month 1 is the start month and month 0 the month before it.
    """
    return project_start.start_of("month").add(months=offset - first_month_number)


def _relative_parsers(
    project_start: pendulum.Date, first_month_number: int
) -> tuple[BoundParser, BoundParser]:
    def parse_start(value: Any) -> Optional[pendulum.Date]:
        offset = month_offset_from_value(value)
        if offset is None:
            return None
        return month_from_offset(offset, project_start, first_month_number)

    def parse_end(value: Any) -> Optional[pendulum.Date]:
        offset = month_offset_from_value(value)
        if offset is None:
            return None
        return month_end(month_from_offset(offset, project_start, first_month_number))

    return parse_start, parse_end


def _calendar_month_parsers() -> tuple[BoundParser, BoundParser]:
    def parse_start(value: Any) -> Optional[pendulum.Date]:
        date = date_from_value(value)
        return month_start(date) if date is not None else None

    def parse_end(value: Any) -> Optional[pendulum.Date]:
        date = date_from_value(value)
        return month_end(date) if date is not None else None

    return parse_start, parse_end


def bound_parsers(
    mode: DateMode,
    project_start_date: Any = None,
    first_month_number: int = 1,
) -> tuple[BoundParser, BoundParser]:
    """
    Build the (start, end) value parsers for a date mode.

    Args:
        mode: The date mode of the table
        project_start_date: Start of the project, used by RELATIVE_MONTH only
        first_month_number: Month number of the project start month

    Returns:
        Tuple of callables turning a raw value into a date, or None when the
        value cannot be parsed
    """
    if mode is DateMode.RELATIVE_MONTH:
        project_start = resolve_project_start(project_start_date)
        return _relative_parsers(project_start, first_month_number)
    if mode is DateMode.CALENDAR_MONTH:
        return _calendar_month_parsers()
    return date_from_value, date_from_value


def _text_field(value: Any, name: str, row_number: int) -> str:
    if is_missing(value):
        raise MalformedInput(f"Row {row_number}: missing {name}")
    return str(value).strip()


def normalize(
    rows: Iterable[Sequence[Any]],
    mode: DateMode,
    project_start_date: Any = None,
    first_month_number: int = 1,
) -> list[TimelineEntry]:
    """
    Convert raw project rows into activity entries with calendar dates.

    RELATIVE_MONTH and CALENDAR_MONTH rows span whole months: the start is
    moved to the first day of its month and the end to the last day of its
    month. EXACT_DATE rows keep their literal dates.

    Args:
        rows: Rows of (work package, activity, start, end)
        mode: How start and end values are to be read
        project_start_date: Start of the project for RELATIVE_MONTH tables
        first_month_number: Month number of the project start month

    Returns:
        One ACTIVITY entry per row, in input order

    Raises:
        MalformedInput: If the table is empty, no start value parses under
            the mode, a row lacks its work package or activity, or a row
            ends before it starts
        UnparseableDate: If an individual start or end cannot be parsed
    """
    project_rows = [as_project_row(row) for row in rows]
    if not project_rows:
        raise MalformedInput("The project table is empty")

    parse_start, parse_end = bound_parsers(mode, project_start_date, first_month_number)

    starts = [parse_start(row.start) for row in project_rows]
    if all(start is None for start in starts):
        raise MalformedInput(
            "No start date could be parsed as "
            f"{mode.value}; make sure the input data are properly formatted "
            "and the right date mode is selected"
        )

    entries: list[TimelineEntry] = []
    for index, (row, start) in enumerate(zip(project_rows, starts)):
        row_number = index + 1
        group_id = _text_field(row.group_id, "work package", row_number)
        label = _text_field(row.label, "activity", row_number)

        if start is None:
            raise UnparseableDate(
                f"Row {row_number} ({label}): cannot parse start {row.start!r} as {mode.value}"
            )
        end = parse_end(row.end)
        if end is None:
            raise UnparseableDate(
                f"Row {row_number} ({label}): cannot parse end {row.end!r} as {mode.value}"
            )
        if end < start:
            raise MalformedInput(
                f"Row {row_number} ({label}): ends ({end}) before it starts ({start})"
            )

        entries.append(
            TimelineEntry(
                group_id=group_id,
                label=label,
                kind=EntryKind.ACTIVITY,
                start=start,
                end=end,
            )
        )

    log.debug("Normalized %d rows as %s", len(entries), mode.value)
    return entries
