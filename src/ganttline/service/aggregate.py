# SPDX-License-Identifier: MIT

import logging

from ganttline.errors import InvariantViolation
from ganttline.model.timeline_entry import EntryKind, TimelineEntry

log = logging.getLogger(__name__)


def summarise_work_package(
    group_id: str, activities: list[TimelineEntry]
) -> TimelineEntry:
    """Build the work package row spanning all of its activities."""
    if not activities:
        raise InvariantViolation(f"Work package '{group_id}' has no activities")
    return TimelineEntry(
        group_id=group_id,
        label=group_id,
        kind=EntryKind.WORK_PACKAGE,
        start=min(activity.start for activity in activities),
        end=max(activity.end for activity in activities),
    )


def aggregate(
    entries: list[TimelineEntry], hide_work_packages: bool = False
) -> list[TimelineEntry]:
    """
    Add one work package row per group and order the timeline for drawing.

    Groups appear in order of first appearance. Each group contributes its
    work package row followed by its activities in input order. Work package
    rows already present in entries are recomputed from their activities, so
    aggregating an aggregated timeline gives the same result.

    Args:
        entries: Normalized timeline entries
        hide_work_packages: Leave the work package rows out of the result

    Returns:
        The ordered timeline

    Raises:
        InvariantViolation: If a work package has no activities
    """
    groups: dict[str, list[TimelineEntry]] = {}
    for entry in entries:
        activities = groups.setdefault(entry.group_id, [])
        if entry.kind is EntryKind.ACTIVITY:
            activities.append(entry)

    timeline: list[TimelineEntry] = []
    for group_id, activities in groups.items():
        work_package = summarise_work_package(group_id, activities)
        if not hide_work_packages:
            timeline.append(work_package)
        timeline.extend(activities)

    log.debug(
        "Aggregated %d activities into %d work packages",
        sum(len(activities) for activities in groups.values()),
        len(groups),
    )
    return timeline
