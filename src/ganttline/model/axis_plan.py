# SPDX-License-Identifier: MIT

from typing import NamedTuple

import pendulum


class AxisTick(NamedTuple):
    date: pendulum.Date
    calendar_label: str
    number_label: str


class AxisPlan(NamedTuple):
    # whole-month range covered by the data
    start: pendulum.Date
    end: pendulum.Date
    month_boundaries: tuple[pendulum.Date, ...]
    bands: tuple[tuple[pendulum.Date, pendulum.Date], ...]
    ticks: tuple[AxisTick, ...]
    quarter_marks: tuple[pendulum.Date, ...]
    year_marks: tuple[pendulum.Date, ...]
