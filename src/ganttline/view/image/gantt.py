# SPDX-License-Identifier: MIT

import datetime
import logging
from pathlib import Path

import matplotlib.pyplot as plt
from matplotlib import ticker
from matplotlib.axes import Axes
from matplotlib.dates import date2num

from ganttline.color import MILESTONE_COLOR, QUARTER_MARK_COLOR, YEAR_MARK_COLOR
from ganttline.model.chart import GanttChart

log = logging.getLogger(__name__)

SUPPORTED_SUFFIXES = {".png", ".pdf", ".svg"}

# ggplot style line widths are given in millimetres
_POINTS_PER_SIZE_UNIT = 2.845

_CAP_STYLES = {"round": "round", "butt": "butt", "square": "projecting"}

_TEXT_ALIGN = {"left": "left", "right": "right", "centre": "center", "center": "center"}


def _num(date: datetime.date) -> float:
    return float(date2num(datetime.date(date.year, date.month, date.day)))


def _ensure_path(path: str | Path) -> Path:
    p = Path(path)
    if not p.parent.exists():
        p.parent.mkdir(parents=True, exist_ok=True)
    return p


def render_image(
    chart: GanttChart,
    output_path: str | Path,
    width: float = 13,
    height: float = 7.5,
    dpi: int = 150,
) -> Path:
    """
    Draw a chart with matplotlib and save it.

    The file format follows the suffix of output_path (PNG, PDF or SVG).

    Args:
        chart: The chart to draw
        output_path: Where to write the image
        width: Figure width in inches
        height: Figure height in inches
        dpi: Resolution for raster output

    Returns:
        The path written to

    Raises:
        ValueError: If the suffix is not a supported format
    """
    output_path = _ensure_path(output_path)
    if output_path.suffix.lower() not in SUPPORTED_SUFFIXES:
        raise ValueError(
            f"Unsupported image format '{output_path.suffix}', "
            f"expected one of {', '.join(sorted(SUPPORTED_SUFFIXES))}"
        )

    options = chart.options
    with plt.rc_context({"font.family": options["font_family"]}):
        fig, ax = plt.subplots(figsize=(width, height))

        _draw_background(ax, chart)
        _draw_segments(ax, chart)
        _draw_milestones(ax, chart)
        _draw_row_labels(ax, chart)
        _draw_time_axis(ax, chart)

        for spine in ax.spines.values():
            spine.set_visible(False)

        fig.tight_layout()
        fig.savefig(output_path, dpi=dpi)
        plt.close(fig)

    log.info("Wrote %s", output_path)
    return output_path


def _draw_background(ax: Axes, chart: GanttChart) -> None:
    options = chart.options
    axis = chart.axis

    if options["show_background_bands"]:
        for band_start, band_end in axis.bands:
            ax.axvspan(
                _num(band_start),
                _num(band_end),
                color=options["colour_stripe"],
                alpha=0.4,
                linewidth=0,
                zorder=0,
            )

    for mark in axis.quarter_marks:
        ax.axvline(_num(mark), color=QUARTER_MARK_COLOR, linewidth=0.8, zorder=1)

    # Year marks are drawn heavier than quarter marks
    for mark in axis.year_marks:
        ax.axvline(_num(mark), color=YEAR_MARK_COLOR, linewidth=2.5, zorder=1)


def _draw_segments(ax: Axes, chart: GanttChart) -> None:
    options = chart.options
    cap_style = _CAP_STYLES.get(options["line_end"], "round")

    for row in chart.rows:
        size = options["size_wp"] if row.entry.is_work_package else options["size_activity"]
        lines = ax.hlines(
            row.position,
            _num(row.entry.start),
            _num(row.entry.end),
            colors=row.colour,
            alpha=row.alpha,
            linewidth=size * _POINTS_PER_SIZE_UNIT,
            zorder=2,
        )
        lines.set_capstyle(cap_style)


def _draw_milestones(ax: Axes, chart: GanttChart) -> None:
    options = chart.options
    for placed in chart.annotations:
        ax.text(
            _num(placed.annotation.date),
            placed.position,
            placed.annotation.text,
            ha="center",
            va="center",
            fontsize=8.5 * options["size_text_relative"],
            fontweight="bold",
            color=MILESTONE_COLOR,
            bbox={
                "boxstyle": "round,pad=0.15",
                "facecolor": "white",
                "edgecolor": MILESTONE_COLOR,
            },
            zorder=3,
        )


def _draw_row_labels(ax: Axes, chart: GanttChart) -> None:
    options = chart.options
    labels = chart.labels_by_position()
    positions = sorted(labels)

    ax.set_yticks(positions)
    ax.set_yticklabels(
        [labels[position].entry.label for position in positions],
        fontsize=10 * options["size_text_relative"],
    )
    for tick_label, position in zip(ax.get_yticklabels(), positions):
        tick_label.set_fontweight("bold" if labels[position].bold_label else "normal")
        tick_label.set_horizontalalignment(_TEXT_ALIGN.get(options["axis_text_align"], "right"))
    ax.tick_params(axis="y", length=0)
    ax.set_ylim(chart.row_count - 0.5, -0.5)


def _draw_time_axis(ax: Axes, chart: GanttChart) -> None:
    options = chart.options
    axis = chart.axis
    label_mode = options["axis_label_mode"]
    fontsize = 9 * options["size_text_relative"]

    ax.set_xlim(
        _num(axis.month_boundaries[0]),
        max(_num(axis.month_boundaries[-1]), _num(axis.end) + 1),
    )
    ax.xaxis.set_minor_locator(ticker.NullLocator())

    tick_positions = [_num(tick.date) for tick in axis.ticks]
    calendar_labels = [tick.calendar_label for tick in axis.ticks]
    number_labels = [tick.number_label for tick in axis.ticks]

    if label_mode == "none":
        ax.set_xticks(tick_positions)
        ax.set_xticklabels([])
    elif label_mode == "both":
        ax.set_xticks(tick_positions)
        ax.set_xticklabels(calendar_labels, fontsize=fontsize)
        secondary = ax.secondary_xaxis("top")
        secondary.set_xticks(tick_positions)
        secondary.set_xticklabels(number_labels, fontsize=fontsize)
        secondary.tick_params(length=0)
        secondary.spines["top"].set_visible(False)
    else:
        labels = calendar_labels if label_mode == "date" else number_labels
        ax.set_xticks(tick_positions)
        ax.set_xticklabels(labels, fontsize=fontsize)
        if options["axis_position"] == "top":
            ax.xaxis.tick_top()

    ax.tick_params(axis="x", length=0)
    if options["show_vertical_lines"]:
        ax.grid(True, axis="x", color="0.85", linewidth=0.8, zorder=1)
    else:
        ax.grid(False, axis="x")
