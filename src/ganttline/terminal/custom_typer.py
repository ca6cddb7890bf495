# SPDX-License-Identifier: MIT

import re
from typing import Optional

import click
import typer.core

_ALIAS_SEPARATOR = re.compile(r" ?, ?")


def command_aliases(registered_name: str) -> list[str]:
    """Split a registered name such as "render, r" into its aliases."""
    return _ALIAS_SEPARATOR.split(registered_name)


class AliasedTyperGroup(typer.core.TyperGroup):
    """
    Command group whose commands are registered as "name, alias" and can be
    invoked by any of those names.
    """

    # Registered names in the order they are listed in --help
    command_order: tuple[str, ...] = ("render, r", "show, s", "plan, p", "config, c")

    def get_command(self, ctx: click.Context, cmd_name: str) -> Optional[click.Command]:
        return super().get_command(ctx, self._registered_name(cmd_name))

    def _registered_name(self, cmd_name: str) -> str:
        for name in self.commands:
            if cmd_name in command_aliases(name):
                return name
        return cmd_name

    def list_commands(self, ctx: click.Context) -> list[str]:
        listed = [name for name in self.command_order if name in self.commands]
        listed.extend(name for name in self.commands if name not in listed)
        return listed


class ConfigTyperGroup(AliasedTyperGroup):
    command_order = ("view, v", "set, s", "reset")
