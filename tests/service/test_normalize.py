import datetime

import pendulum
import pytest

from ganttline.errors import MalformedInput, UnparseableDate
from ganttline.model.date_mode import DateMode, date_mode_from_flags
from ganttline.model.timeline_entry import EntryKind
from ganttline.service.normalize import month_from_offset, normalize
from ganttline.time import today


def test_zero_based_month_numbers():
    entries = normalize(
        [("A", "Design", 0, 2)],
        DateMode.RELATIVE_MONTH,
        project_start_date="2024-01",
        first_month_number=0,
    )

    assert len(entries) == 1
    entry = entries[0]
    assert entry.group_id == "A"
    assert entry.label == "Design"
    assert entry.kind is EntryKind.ACTIVITY
    assert entry.start == pendulum.date(2024, 1, 1)
    assert entry.end == pendulum.date(2024, 3, 31)


def test_month_one_is_the_project_start_month():
    entries = normalize(
        [("A", "Design", 1, 3), ("A", "Prep", 0, 0)],
        DateMode.RELATIVE_MONTH,
        project_start_date="2024-01-20",
    )

    assert entries[0].start == pendulum.date(2024, 1, 1)
    assert entries[0].end == pendulum.date(2024, 3, 31)
    assert entries[1].start == pendulum.date(2023, 12, 1)
    assert entries[1].end == pendulum.date(2023, 12, 31)


def test_month_numbers_from_text_cells():
    entries = normalize(
        [("A", "Design", "2", "13")], DateMode.RELATIVE_MONTH, project_start_date="2024-01"
    )

    assert entries[0].start == pendulum.date(2024, 2, 1)
    assert entries[0].end == pendulum.date(2025, 1, 31)


@pytest.mark.parametrize("start,end", [(1, 1), (1, 3), (2, 5), (11, 14), (24, 30)])
def test_month_numbers_match_calendar_months(start, end):
    project_start = pendulum.date(2024, 1, 1)
    relative = normalize(
        [("A", "Design", start, end)],
        DateMode.RELATIVE_MONTH,
        project_start_date=project_start,
    )
    calendar = normalize(
        [
            (
                "A",
                "Design",
                month_from_offset(start, project_start).format("YYYY-MM"),
                month_from_offset(end, project_start).format("YYYY-MM"),
            )
        ],
        DateMode.CALENDAR_MONTH,
    )

    assert relative == calendar


def test_calendar_months_are_widened():
    entries = normalize(
        [("A", "Design", "2024-02-10", "2024-02-10")], DateMode.CALENDAR_MONTH
    )

    assert entries[0].start == pendulum.date(2024, 2, 1)
    assert entries[0].end == pendulum.date(2024, 2, 29)


def test_calendar_months_from_date_objects():
    entries = normalize(
        [("A", "Design", datetime.date(2024, 1, 15), datetime.date(2024, 4, 2))],
        DateMode.CALENDAR_MONTH,
    )

    assert entries[0].start == pendulum.date(2024, 1, 1)
    assert entries[0].end == pendulum.date(2024, 4, 30)


def test_exact_dates_are_kept():
    entries = normalize(
        [("A", "Design", "2024-02-10", "2024-03-05")], DateMode.EXACT_DATE
    )

    assert entries[0].start == pendulum.date(2024, 2, 10)
    assert entries[0].end == pendulum.date(2024, 3, 5)


def test_single_day_activity():
    entries = normalize([("A", "Launch", "2024-02-10", "2024-02-10")], DateMode.EXACT_DATE)

    assert entries[0].start == entries[0].end


def test_input_order_is_preserved():
    entries = normalize(
        [("B", "Late", 5, 6), ("A", "Early", 1, 2), ("B", "Middle", 3, 4)],
        DateMode.RELATIVE_MONTH,
        project_start_date="2024-01",
    )

    assert [entry.label for entry in entries] == ["Late", "Early", "Middle"]


def test_missing_project_start_counts_from_today():
    entries = normalize([("A", "Design", 1, 1)], DateMode.RELATIVE_MONTH)

    assert entries[0].start == today().start_of("month")


def test_no_start_parses():
    with pytest.raises(MalformedInput, match="No start date could be parsed"):
        normalize(
            [("A", "Design", "2024-01", "2024-03"), ("A", "Build", "2024-02", "2024-04")],
            DateMode.RELATIVE_MONTH,
            project_start_date="2024-01",
        )


def test_single_unparseable_start():
    with pytest.raises(UnparseableDate, match="Build"):
        normalize(
            [("A", "Design", 1, 3), ("A", "Build", "1.5", 4)],
            DateMode.RELATIVE_MONTH,
            project_start_date="2024-01",
        )


def test_unparseable_end():
    with pytest.raises(UnparseableDate, match="end"):
        normalize([("A", "Design", "2024-01-01", "later")], DateMode.EXACT_DATE)


def test_end_before_start():
    with pytest.raises(MalformedInput, match="before it starts"):
        normalize([("A", "Design", "2024-03-01", "2024-02-01")], DateMode.EXACT_DATE)


def test_missing_activity():
    with pytest.raises(MalformedInput, match="missing activity"):
        normalize(
            [("A", "", 1, 2)], DateMode.RELATIVE_MONTH, project_start_date="2024-01"
        )


def test_empty_table():
    with pytest.raises(MalformedInput, match="empty"):
        normalize([], DateMode.RELATIVE_MONTH, project_start_date="2024-01")


def test_short_row():
    with pytest.raises(MalformedInput, match="4 fields"):
        normalize([("A", "Design", 1)], DateMode.RELATIVE_MONTH, project_start_date="2024-01")


def test_bad_project_start():
    with pytest.raises(MalformedInput, match="project start"):
        normalize([("A", "Design", 1, 2)], DateMode.RELATIVE_MONTH, project_start_date="soon")


@pytest.mark.parametrize(
    "by_date,exact_date,expected",
    [
        (False, False, DateMode.RELATIVE_MONTH),
        (True, False, DateMode.CALENDAR_MONTH),
        (True, True, DateMode.EXACT_DATE),
        (False, True, DateMode.EXACT_DATE),
    ],
)
def test_date_mode_from_flags(by_date, exact_date, expected):
    assert date_mode_from_flags(by_date, exact_date) is expected


@pytest.mark.parametrize("mode", [DateMode.CALENDAR_MONTH, DateMode.EXACT_DATE])
def test_month_numbers_are_not_dates(mode):
    with pytest.raises(MalformedInput, match="No start date could be parsed"):
        normalize([("A", "Design", "1", "3"), ("A", "Build", "2", "4")], mode)
