# SPDX-License-Identifier: MIT


class GanttError(ValueError):
    """Base class for errors raised while building a chart."""


class MalformedInput(GanttError):
    """The project table cannot be read under the declared date mode."""


class UnparseableDate(MalformedInput):
    """A single row carries a start or end value that cannot be parsed."""


class InvariantViolation(GanttError):
    """An internal construction rule was broken."""


class UnmatchedReference(GanttError):
    """A milestone refers to an activity that is not on the timeline."""
