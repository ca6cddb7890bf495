# SPDX-License-Identifier: MIT

from ganttline.configuration import Configuration
from ganttline.template.chart_options import get_chart_options_template


def get_configuration_template() -> Configuration:
    return {
        "project_start_date": None,
        "output_dpi": 150,
        "show_header": True,
        "chart": get_chart_options_template(),
    }
