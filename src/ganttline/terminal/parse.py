# SPDX-License-Identifier: MIT

import re
from typing import Optional

import pendulum
import typer

from ganttline.time import date_from_value, today


def parse_date(date_param: Optional[str]) -> Optional[pendulum.Date]:
    if date_param is None:
        return None

    date = date_param.strip()

    if date == "today" or date == "t":
        return today()

    # Match YYYY-MM and YYYY-MM-DD
    if re.match(r"^\d{4}-\d{1,2}(-\d{1,2})?$", date):
        parsed = date_from_value(date)
        if parsed is not None:
            return parsed

    raise typer.BadParameter("Incorrect date format, expected YYYY-MM, YYYY-MM-DD or today")


def parse_columns(columns_param: Optional[str]) -> Optional[list[int | str]]:
    """
    Parse a comma-separated list of column positions or names.

    Positions are 1-based on the command line, the way spreadsheet users
    count them, and 0-based in the result.

    Args:
        columns_param: e.g. "1,2,3,4" or "wp,activity,start,end"

    Returns:
        List of 0-based positions and column names, or None if not given

    Raises:
        typer.BadParameter: If a position is not positive or the list is empty
    """
    if columns_param is None:
        return None

    columns: list[int | str] = []
    for column in (part.strip() for part in columns_param.split(",")):
        if not column:
            continue
        if re.match(r"^-?\d+$", column):
            position = int(column)
            if position < 1:
                raise typer.BadParameter(
                    f"Column positions start at 1, got {position}"
                )
            columns.append(position - 1)
        else:
            columns.append(column)

    if len(columns) == 0:
        raise typer.BadParameter("No columns provided")

    return columns
