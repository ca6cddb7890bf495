# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Any, Optional

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from ganttline import configuration
from ganttline.model.chart import ChartOptions
from ganttline.template.configuration import get_configuration_template


class ConfigurationRepository:
    def __init__(self) -> None:
        self._config: Optional[configuration.Configuration] = None
        self.is_dirty = False

    @property
    def config(self) -> configuration.Configuration:
        if self._config is None:
            self.__load_data()
        if self._config is None:
            raise ValueError()
        return self._config

    def __load_data(self) -> None:
        self._config = load(configuration.APP_CONFIG_PATH.read_text(), Loader=Loader)

        if self._config is None:
            raise ValueError(
                f"Configuration file {configuration.APP_CONFIG_PATH} is empty"
            )

        # Migration: back-fill settings added after the file was written
        template = get_configuration_template()
        for key, value in template.items():
            if key not in self._config:
                self._config[key] = value  # type: ignore[literal-required]
        if self._config["chart"] is None:
            self._config["chart"] = template["chart"]
        chart = self._config["chart"]
        for key, value in template["chart"].items():
            if key not in chart:
                chart[key] = value  # type: ignore[literal-required]

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.APP_CONFIG_PATH.write_text(dump(config, Dumper=Dumper))

    def flush(self) -> None:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False

    def reload(self) -> None:
        self._config = None
        self.is_dirty = False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def get_chart_options(self) -> ChartOptions:
        return deepcopy(self.config["chart"])

    def update_config(
        self,
        project_start_date: Optional[str] = None,
        remove_project_start_date: bool = False,
        output_dpi: Optional[int] = None,
        show_header: Optional[bool] = None,
    ) -> None:
        self.is_dirty = True

        if project_start_date is not None:
            self.config["project_start_date"] = project_start_date
        if remove_project_start_date:
            self.config["project_start_date"] = None
        if output_dpi is not None:
            self.config["output_dpi"] = output_dpi
        if show_header is not None:
            self.config["show_header"] = show_header

    def update_chart_options(self, options: dict[str, Any]) -> None:
        unknown = set(options) - set(self.config["chart"])
        if unknown:
            raise ValueError(f"Unknown chart options: {', '.join(sorted(unknown))}")
        self.is_dirty = True
        self.config["chart"].update(options)  # type: ignore[typeddict-item]

    def reset_config(self) -> None:
        self.is_dirty = True
        self._config = get_configuration_template()


CONFIGURATION_REPO = ConfigurationRepository()
