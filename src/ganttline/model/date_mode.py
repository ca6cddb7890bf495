# SPDX-License-Identifier: MIT

from enum import Enum


class DateMode(Enum):
    RELATIVE_MONTH = "relative_month"
    CALENDAR_MONTH = "calendar_month"
    EXACT_DATE = "exact_date"


def date_mode_from_flags(by_date: bool, exact_date: bool) -> DateMode:
    """
    Map the by_date / exact_date flag pair onto a date mode.

    exact_date wins over by_date, so (False, True) and (True, True) both give
    EXACT_DATE.
    """
    if exact_date:
        return DateMode.EXACT_DATE
    if by_date:
        return DateMode.CALENDAR_MONTH
    return DateMode.RELATIVE_MONTH
