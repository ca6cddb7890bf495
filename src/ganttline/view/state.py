# SPDX-License-Identifier: MIT

"""Display settings shared by the terminal views of one invocation."""

from contextvars import ContextVar

# Set from the configuration and --no-header before a command runs
_header_visible: ContextVar[bool] = ContextVar("header_visible", default=True)


def set_show_header(value: bool) -> None:
    _header_visible.set(value)


def get_show_header() -> bool:
    """Return whether the application header is printed before a chart."""
    return _header_visible.get()
