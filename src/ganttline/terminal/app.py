# SPDX-License-Identifier: MIT

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from ganttline import configuration as app_configuration
from ganttline.repository.configuration import CONFIGURATION_REPO
from ganttline.terminal import configuration
from ganttline.terminal.chart import plan, render, show
from ganttline.terminal.custom_typer import AliasedTyperGroup
from ganttline.view import state as view_state

app = typer.Typer(
    cls=AliasedTyperGroup,
    help="ganttline - Gantt charts for project timelines",
    no_args_is_help=True,
)
app.add_typer(configuration.app, name="config, c")
app.command(name="render, r")(render)
app.command(name="show, s")(show)
app.command(name="plan, p")(plan)


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )
    # matplotlib's font manager is chatty at debug level
    logging.getLogger("matplotlib").setLevel(logging.WARNING)


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log pipeline details"),
    ] = False,
    config_file: Annotated[
        Optional[Path],
        typer.Option(
            "--config",
            help="Use this configuration file instead of the default one",
        ),
    ] = None,
) -> None:
    """
    ganttline - Gantt charts for project timelines

    Global options that apply to all commands.
    """
    configure_logging(verbose)
    if config_file is not None:
        if not config_file.is_file():
            raise typer.BadParameter(
                f"No such configuration file: {config_file}", param_hint="--config"
            )
        app_configuration.set_config_path(config_file)
        CONFIGURATION_REPO.reload()
        view_state.set_show_header(CONFIGURATION_REPO.get_config()["show_header"])
    if no_header:
        view_state.set_show_header(False)


def run() -> None:
    app()
