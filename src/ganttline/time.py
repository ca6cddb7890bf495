# SPDX-License-Identifier: MIT

import datetime
import math
import re
from typing import Any, Optional

import pendulum

_YEAR_MONTH_PATTERN = re.compile(r"^(\d{4})[-/](\d{1,2})$")
_YEAR_MONTH_DAY_PATTERN = re.compile(r"^(\d{4})-(\d{1,2})-(\d{1,2})(?:[T ].*)?$")


def is_missing(value: Any) -> bool:
    """Return True for None, blank strings and NaN floats."""
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    if isinstance(value, float):
        return math.isnan(value)
    return False


def date_from_python(value: datetime.date) -> pendulum.Date:
    return pendulum.date(value.year, value.month, value.day)


def date_from_value(value: Any) -> Optional[pendulum.Date]:
    """
    Parse a calendar date from a raw table value.

    Accepts date and datetime instances, "YYYY-MM" (first day of the month),
    "YYYY-MM-DD" and "YYYY-MM-DD" followed by a time component. Bare numbers
    such as "3" or "3.5" are not dates.

    Args:
        value: The raw value

    Returns:
        The parsed date, or None if the value is missing or cannot be parsed
    """
    if is_missing(value):
        return None
    if isinstance(value, datetime.date):
        return date_from_python(value)
    if not isinstance(value, str):
        return None

    text = value.strip()

    year_month_match = _YEAR_MONTH_PATTERN.match(text)
    if year_month_match:
        year = int(year_month_match.group(1))
        month = int(year_month_match.group(2))
        if not (1 <= month <= 12):
            return None
        return pendulum.date(year, month, 1)

    year_month_day_match = _YEAR_MONTH_DAY_PATTERN.match(text)
    if year_month_day_match:
        try:
            return pendulum.date(
                int(year_month_day_match.group(1)),
                int(year_month_day_match.group(2)),
                int(year_month_day_match.group(3)),
            )
        except ValueError:
            return None

    return None


def month_offset_from_value(value: Any) -> Optional[int]:
    """
    Parse a whole month number from a raw table value.

    Returns None for missing values, booleans, non-numeric strings and
    fractional numbers.
    """
    if is_missing(value) or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            return None
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value) or not value.is_integer():
            return None
        return int(value)
    return None


def month_start(date: pendulum.Date) -> pendulum.Date:
    return date.start_of("month")


def month_end(date: pendulum.Date) -> pendulum.Date:
    return date.end_of("month")


def month_midpoint(date: pendulum.Date) -> pendulum.Date:
    """Return the middle day of the month containing date (the 15th or 16th)."""
    first = date.start_of("month")
    return first.add(days=first.days_in_month // 2)


def months_between(start: pendulum.Date, end: pendulum.Date) -> int:
    """Number of calendar months from the month of start to the month of end."""
    return (end.year - start.year) * 12 + end.month - start.month


def year_floor(date: pendulum.Date) -> pendulum.Date:
    return date.start_of("year")


def year_ceiling(date: pendulum.Date) -> pendulum.Date:
    """Return the first January 1st on or after date."""
    if date.month == 1 and date.day == 1:
        return date
    return date.start_of("year").add(years=1)


def date_to_iso_str(date: pendulum.Date) -> str:
    return date.format("YYYY-MM-DD")


def date_to_display_str(date: pendulum.Date) -> str:
    return date.format("YYYY-MM-DD ddd")


def today() -> pendulum.Date:
    return pendulum.today("local").date()
