# SPDX-License-Identifier: MIT

from typing import Optional

import typer

AXIS_LABEL_MODES = ("number", "date", "both", "none")
AXIS_POSITIONS = ("top", "bottom")
LINE_ENDS = ("round", "butt", "square")
TEXT_ALIGNS = ("left", "right", "centre", "center")


def validate_stride(stride: Optional[int]) -> Optional[int]:
    if stride is None:
        return None
    if stride < 1:
        raise typer.BadParameter("Tick stride must be at least 1 month")
    return stride


def validate_alpha(alpha: Optional[float]) -> Optional[float]:
    if alpha is None:
        return None
    if not (0 <= alpha <= 1):
        raise typer.BadParameter("Alpha must be between 0 and 1 (inclusive)")
    return alpha


def validate_positive(value: Optional[float]) -> Optional[float]:
    if value is None:
        return None
    if value <= 0:
        raise typer.BadParameter("Value must be greater than 0")
    return value


def _validate_choice(
    value: Optional[str], choices: tuple[str, ...], name: str
) -> Optional[str]:
    if value is None:
        return None
    if value not in choices:
        raise typer.BadParameter(f"{name} must be one of: {', '.join(choices)}")
    return value


def validate_axis_label_mode(value: Optional[str]) -> Optional[str]:
    return _validate_choice(value, AXIS_LABEL_MODES, "Axis label mode")


def validate_axis_position(value: Optional[str]) -> Optional[str]:
    return _validate_choice(value, AXIS_POSITIONS, "Axis position")


def validate_line_end(value: Optional[str]) -> Optional[str]:
    return _validate_choice(value, LINE_ENDS, "Line end")


def validate_text_align(value: Optional[str]) -> Optional[str]:
    return _validate_choice(value, TEXT_ALIGNS, "Text alignment")
