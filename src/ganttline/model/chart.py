# SPDX-License-Identifier: MIT

from typing import Literal, NamedTuple, TypedDict

from ganttline.model.annotation import PlacedAnnotation
from ganttline.model.axis_plan import AxisPlan
from ganttline.model.timeline_entry import TimelineEntry

AxisLabelMode = Literal["number", "date", "both", "none"]
AxisPosition = Literal["top", "bottom"]
LineEnd = Literal["round", "butt", "square"]
TextAlign = Literal["left", "right", "centre", "center"]


class ChartOptions(TypedDict):
    tick_stride_months: int
    mark_quarters: bool
    mark_years: bool
    hide_work_packages: bool
    show_background_bands: bool
    axis_label_mode: AxisLabelMode
    axis_position: AxisPosition
    alpha_wp: float
    alpha_activity: float
    size_wp: float
    size_activity: float
    size_text_relative: float
    colour_palette: list[str]
    colour_stripe: str
    font_family: str
    line_end: LineEnd
    show_vertical_lines: bool
    axis_text_align: TextAlign
    first_month_number: int
    strict_annotations: bool


class ChartRow(NamedTuple):
    entry: TimelineEntry
    # 0 is the top row
    position: int
    alpha: float
    bold_label: bool
    colour: str


class GanttChart(NamedTuple):
    rows: list[ChartRow]
    axis: AxisPlan
    annotations: list[PlacedAnnotation]
    options: ChartOptions
    dropped_annotations: int

    @property
    def row_count(self) -> int:
        if not self.rows:
            return 0
        return max(row.position for row in self.rows) + 1

    def labels_by_position(self) -> dict[int, ChartRow]:
        """First row drawn at each position; later rows sharing a label reuse it."""
        labels: dict[int, ChartRow] = {}
        for row in self.rows:
            labels.setdefault(row.position, row)
        return labels
