import logging
import math

import pendulum
import pytest

from ganttline.errors import UnmatchedReference
from ganttline.model.date_mode import DateMode
from ganttline.service.annotation import normalize_annotations, validate_annotation_rows
from ganttline.service.normalize import normalize


@pytest.fixture
def entries():
    return normalize(
        [("A", "Design", 1, 3), ("A", "Build", 2, 6)],
        DateMode.RELATIVE_MONTH,
        project_start_date="2024-01",
    )


def test_incomplete_rows_are_dropped(entries):
    annotations = normalize_annotations(
        [("Design", None, "Kickoff"), ("Design", 2, "Review")],
        entries,
        DateMode.RELATIVE_MONTH,
        project_start_date="2024-01",
    )

    assert len(annotations) == 1
    assert annotations[0].activity_label == "Design"
    assert annotations[0].text == "Review"
    assert annotations[0].date == pendulum.date(2024, 2, 15)


def test_validate_counts_dropped_rows():
    kept, dropped = validate_annotation_rows(
        [
            ("Design", 2, "Review"),
            ("", 2, "Review"),
            ("Design", math.nan, "Review"),
            ("Design", 3),
        ]
    )

    assert dropped == 3
    assert [row.spot_type for row in kept] == ["Review"]


def test_calendar_month_milestones_sit_mid_month(entries):
    annotations = normalize_annotations(
        [("Build", "2024-03", "Beta"), ("Build", "2024-04-28", "RC")],
        entries,
        DateMode.CALENDAR_MONTH,
    )

    assert [annotation.date for annotation in annotations] == [
        pendulum.date(2024, 3, 16),
        pendulum.date(2024, 4, 16),
    ]


def test_exact_date_milestones_keep_their_date(entries):
    annotations = normalize_annotations(
        [("Build", "2024-03-03", "Beta")], entries, DateMode.EXACT_DATE
    )

    assert annotations[0].date == pendulum.date(2024, 3, 3)


def test_unknown_activity_is_dropped_with_a_warning(entries, caplog):
    with caplog.at_level(logging.WARNING, logger="ganttline.service.annotation"):
        annotations = normalize_annotations(
            [("Deploy", 2, "Go live"), ("Build", 4, "Beta")],
            entries,
            DateMode.RELATIVE_MONTH,
            project_start_date="2024-01",
        )

    assert [annotation.text for annotation in annotations] == ["Beta"]
    assert "Deploy" in caplog.text


def test_unknown_activity_in_strict_mode(entries):
    with pytest.raises(UnmatchedReference, match="Deploy"):
        normalize_annotations(
            [("Deploy", 2, "Go live")],
            entries,
            DateMode.RELATIVE_MONTH,
            project_start_date="2024-01",
            strict=True,
        )


def test_unparseable_milestone_date_is_dropped(entries):
    annotations = normalize_annotations(
        [("Build", "soon", "Beta")],
        entries,
        DateMode.RELATIVE_MONTH,
        project_start_date="2024-01",
    )

    assert annotations == []


def test_input_order_is_preserved(entries):
    annotations = normalize_annotations(
        [("Build", 5, "Beta"), ("Design", 1, "Kickoff"), ("Build", 6, "Release")],
        entries,
        DateMode.RELATIVE_MONTH,
        project_start_date="2024-01",
    )

    assert [annotation.text for annotation in annotations] == ["Beta", "Kickoff", "Release"]


def test_no_rows(entries):
    assert normalize_annotations([], entries, DateMode.EXACT_DATE) == []


def test_month_numbers_are_not_milestone_dates(entries):
    annotations = normalize_annotations(
        [("Build", "3.5", "Beta"), ("Build", "3", "RC")], entries, DateMode.CALENDAR_MONTH
    )

    assert annotations == []
