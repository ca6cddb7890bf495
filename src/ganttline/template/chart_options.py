# SPDX-License-Identifier: MIT

from ganttline.color import DEFAULT_PALETTE, DEFAULT_STRIPE_COLOR
from ganttline.model.chart import ChartOptions


def get_chart_options_template() -> ChartOptions:
    return {
        "tick_stride_months": 1,
        "mark_quarters": False,
        "mark_years": False,
        "hide_work_packages": False,
        "show_background_bands": True,
        "axis_label_mode": "both",
        "axis_position": "top",
        "alpha_wp": 1.0,
        "alpha_activity": 1.0,
        "size_wp": 6.0,
        "size_activity": 4.0,
        "size_text_relative": 1.0,
        "colour_palette": list(DEFAULT_PALETTE),
        "colour_stripe": DEFAULT_STRIPE_COLOR,
        "font_family": "sans-serif",
        "line_end": "round",
        "show_vertical_lines": True,
        "axis_text_align": "right",
        "first_month_number": 1,
        "strict_annotations": False,
    }
