import pendulum
import pytest

from ganttline.errors import MalformedInput, UnmatchedReference
from ganttline.model.date_mode import DateMode
from ganttline.model.timeline_entry import EntryKind
from ganttline.service.chart import assign_positions, build_chart, merge_chart_options
from ganttline.service.aggregate import aggregate
from ganttline.service.normalize import normalize


def test_rows_are_positioned_top_to_bottom(chart):
    assert [(row.position, row.entry.label) for row in chart.rows] == [
        (0, "WP1 Planning"),
        (1, "Design"),
        (2, "Requirements"),
        (3, "WP2 Build"),
        (4, "Implementation"),
        (5, "Testing"),
    ]
    assert chart.row_count == 6


def test_work_packages_are_bold(chart):
    assert [row.bold_label for row in chart.rows] == [True, False, False, True, False, False]


def test_colours_follow_work_packages(chart):
    options = chart.options
    colours = {row.entry.group_id: row.colour for row in chart.rows}

    assert colours == {
        "WP1 Planning": options["colour_palette"][0],
        "WP2 Build": options["colour_palette"][1],
    }


def test_colours_cycle_through_a_short_palette(project_rows):
    chart = build_chart(
        project_rows,
        project_start_date="2024-01",
        options={"colour_palette": ["#123456"]},
    )

    assert {row.colour for row in chart.rows} == {"#123456"}


def test_alpha_per_row_kind(project_rows):
    chart = build_chart(
        project_rows,
        project_start_date="2024-01",
        options={"alpha_wp": 0.5, "alpha_activity": 0.8},
    )

    for row in chart.rows:
        assert row.alpha == (0.5 if row.entry.is_work_package else 0.8)


def test_hidden_work_packages_keep_the_axis(project_rows):
    shown = build_chart(project_rows, project_start_date="2024-01")
    hidden = build_chart(
        project_rows, project_start_date="2024-01", options={"hide_work_packages": True}
    )

    assert all(row.entry.kind is EntryKind.ACTIVITY for row in hidden.rows)
    assert [row.position for row in hidden.rows] == [0, 1, 2, 3]
    assert hidden.axis == shown.axis


def test_milestones_are_placed_on_their_rows(chart):
    placed = {(p.annotation.text, p.position) for p in chart.annotations}

    assert placed == {("Review", 1), ("Beta", 4), ("Release", 5)}
    assert chart.dropped_annotations == 1


def test_milestone_dates(chart):
    dates = {p.annotation.text: p.annotation.date for p in chart.annotations}

    assert dates["Review"] == pendulum.date(2024, 2, 15)
    assert dates["Release"] == pendulum.date(2024, 10, 16)


def test_axis_is_planned_from_the_timeline(chart):
    assert chart.axis.start == pendulum.date(2024, 1, 1)
    assert chart.axis.end == pendulum.date(2024, 10, 31)
    assert chart.axis.year_marks == (pendulum.date(2024, 1, 1), pendulum.date(2025, 1, 1))
    assert len(chart.axis.ticks) == 10


def test_shared_labels_share_a_row():
    chart = build_chart(
        [("A", "Review", 1, 1), ("B", "Review", 3, 3)], project_start_date="2024-01"
    )

    positions = {(row.entry.group_id, row.entry.label): row.position for row in chart.rows}
    assert positions[("A", "Review")] == positions[("B", "Review")]
    assert len(chart.labels_by_position()) == 3


def test_strict_milestones(project_rows):
    with pytest.raises(UnmatchedReference):
        build_chart(
            project_rows,
            [("Unknown", 2, "Review")],
            project_start_date="2024-01",
            options={"strict_annotations": True},
        )


def test_errors_surface_before_rendering():
    with pytest.raises(MalformedInput):
        build_chart(
            [("A", "Design", "x", "y")], mode=DateMode.EXACT_DATE
        )


def test_unknown_option():
    with pytest.raises(ValueError, match="color"):
        merge_chart_options({"color": "red"})


def test_merge_keeps_defaults():
    options = merge_chart_options({"tick_stride_months": 3})

    assert options["tick_stride_months"] == 3
    assert options["first_month_number"] == 1
    assert options["show_background_bands"] is True


def test_assign_positions(project_rows):
    timeline = aggregate(
        normalize(project_rows, DateMode.RELATIVE_MONTH, project_start_date="2024-01")
    )

    assert assign_positions(timeline)["Testing"] == 5
