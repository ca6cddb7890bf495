import pytest

from ganttline.service.chart import build_chart
from ganttline.view.image.gantt import render_image


@pytest.mark.parametrize("suffix", [".png", ".pdf", ".svg"])
def test_render_image(chart, tmp_path, suffix):
    output = render_image(chart, tmp_path / f"chart{suffix}", dpi=50)

    assert output.is_file()
    assert output.stat().st_size > 0


def test_png_signature(chart, tmp_path):
    output = render_image(chart, tmp_path / "chart.png", width=8, height=5, dpi=50)

    assert output.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"


def test_missing_directories_are_created(chart, tmp_path):
    output = render_image(chart, tmp_path / "out" / "nested" / "chart.png", dpi=50)

    assert output.is_file()


@pytest.mark.parametrize(
    "options",
    [
        {"axis_label_mode": "number", "axis_position": "top"},
        {"axis_label_mode": "date", "axis_position": "bottom"},
        {"axis_label_mode": "none", "show_vertical_lines": False},
        {"hide_work_packages": True, "show_background_bands": False},
        {"line_end": "butt", "axis_text_align": "left", "size_text_relative": 1.5},
    ],
)
def test_render_options(project_rows, spot_rows, tmp_path, options):
    chart = build_chart(
        project_rows, spot_rows, project_start_date="2024-01", options=options
    )

    assert render_image(chart, tmp_path / "chart.png", dpi=50).is_file()


def test_unsupported_format(chart, tmp_path):
    with pytest.raises(ValueError, match=".gif"):
        render_image(chart, tmp_path / "chart.gif")
