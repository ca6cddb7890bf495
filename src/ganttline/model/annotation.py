# SPDX-License-Identifier: MIT

from typing import Any, NamedTuple

import pendulum


class SpotRow(NamedTuple):
    """A raw row of the milestone table."""

    activity: Any
    spot_date: Any
    spot_type: Any


class Annotation(NamedTuple):
    activity_label: str
    date: pendulum.Date
    text: str


class PlacedAnnotation(NamedTuple):
    annotation: Annotation
    position: int
