# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Annotated, Optional

import typer

from commitments import state as app_state
from commitments.logger import configure_logging
from commitments.terminal import configuration
from commitments.terminal.commitment import agenda, list_commitments, show
from commitments.terminal.custom_typer import AliasedTyperGroup

app = typer.Typer(
    cls=AliasedTyperGroup,
    help="Commitments - Urgency and review scheduling in the CLI",
    no_args_is_help=True,
)
app.add_typer(configuration.app, name="config, c")
app.command(name="list, l")(list_commitments)
app.command(name="show, s")(show)
app.command(name="agenda, a")(agenda)


@app.callback()
def main_callback(
    file: Annotated[
        Optional[Path],
        typer.Option(
            "--file",
            "-f",
            help="Snapshot to read instead of the configured one",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Log debug output to stderr",
        ),
    ] = False,
) -> None:
    """
    Commitments - Urgency and review scheduling in the CLI

    Global options that apply to all commands.
    """
    configure_logging(verbose)
    app_state.set_snapshot_path(file)


def run() -> None:
    app()
