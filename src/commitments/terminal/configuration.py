# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from commitments import configuration
from commitments.repository.configuration import CONFIGURATION_REPO
from commitments.terminal.custom_typer import AliasedTyperGroup

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    try:
        config = CONFIGURATION_REPO.get_config()
    except configuration.ConfigurationError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(1)

    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("day_start_hour", str(config["day_start_hour"]))
    table.add_row("week_start", config["week_start"])
    table.add_row(
        "snapshot_path",
        config["snapshot_path"] or f"None ({configuration.DEFAULT_SNAPSHOT_PATH})",
    )
    table.add_row("config_path", str(CONFIGURATION_REPO.path))

    console.print(table)


@app.command("set")
def set(
    day_start_hour: Annotated[
        Optional[int],
        typer.Option(
            "--day-start-hour",
            help="Hour (0-23) at which a new logical day begins",
        ),
    ] = None,
    week_start: Annotated[
        Optional[str],
        typer.Option(
            "--week-start",
            help="First day of the week for weekly habits (sunday or monday)",
        ),
    ] = None,
    snapshot_path: Annotated[
        Optional[str],
        typer.Option(
            "--snapshot-path",
            help="Path of the JSON or YAML snapshot to read commitments from",
        ),
    ] = None,
    remove_snapshot_path: Annotated[
        bool,
        typer.Option(
            "--remove-snapshot-path",
            help="Reset snapshot path to None (use the default data file)",
        ),
    ] = False,
) -> None:
    """
    Update configuration settings.
    """
    try:
        CONFIGURATION_REPO.update_config(
            day_start_hour=day_start_hour,
            week_start=week_start,
            snapshot_path=snapshot_path,
            remove_snapshot_path=remove_snapshot_path,
        )
    except configuration.ConfigurationError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(1)

    typer.echo("Configuration updated")
