# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Optional, TypedDict

import platformdirs

from ganttline.model.chart import ChartOptions

APP_NAME = "ganttline"

CONFIG_PATH: Path = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH: Path = CONFIG_PATH / "config.yaml"


class Configuration(TypedDict):
    # "YYYY-MM" or "YYYY-MM-DD"; None counts months from today
    project_start_date: Optional[str]
    output_dpi: int
    show_header: bool
    chart: ChartOptions


def set_config_path(config_path: Path) -> None:
    """Point the application at a different configuration file."""
    global CONFIG_PATH, APP_CONFIG_PATH

    CONFIG_PATH = config_path.parent
    APP_CONFIG_PATH = config_path
