# SPDX-License-Identifier: MIT

from enum import Enum
from typing import Any, NamedTuple

import pendulum


class EntryKind(Enum):
    WORK_PACKAGE = "wp"
    ACTIVITY = "activity"


class ProjectRow(NamedTuple):
    """A raw row of the project table, before any date parsing."""

    group_id: Any
    label: Any
    start: Any
    end: Any


class TimelineEntry(NamedTuple):
    group_id: str
    label: str
    kind: EntryKind
    start: pendulum.Date
    end: pendulum.Date

    @property
    def is_work_package(self) -> bool:
        return self.kind is EntryKind.WORK_PACKAGE
