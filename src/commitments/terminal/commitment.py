# SPDX-License-Identifier: MIT

import logging
from pathlib import Path
from typing import Annotated

import typer

from commitments import configuration
from commitments import state as app_state
from commitments.query.sort import sort_commitments
from commitments.repository.commitment import (
    CommitmentNotFoundError,
    CommitmentRepository,
    SnapshotFormatError,
)
from commitments.repository.configuration import CONFIGURATION_REPO
from commitments.service.day import DayContext
from commitments.time import now_utc
from commitments.view.commitment import (
    agenda_view,
    commitments_view,
    single_commitment_view,
)

logger = logging.getLogger(__name__)


def _load() -> tuple[DayContext, CommitmentRepository]:
    try:
        config = CONFIGURATION_REPO.get_config()
    except configuration.ConfigurationError as e:
        typer.echo(f"Invalid configuration: {e}", err=True)
        raise typer.Exit(1)

    path: Path = app_state.get_snapshot_path() or configuration.get_snapshot_path(config)
    if not path.is_file():
        typer.echo(f"No snapshot found at {path}", err=True)
        raise typer.Exit(1)

    day = DayContext.from_clock(
        now_utc,
        day_start_hour=config["day_start_hour"],
        week_start=config["week_start"],
    )
    logger.debug("reporting on %s from %s", day.today, path)
    return day, CommitmentRepository(path)


def list_commitments(
    archived: Annotated[
        bool,
        typer.Option("--archived", "-a", help="List archived commitments instead"),
    ] = False,
) -> None:
    """
    List commitments, most urgent first.
    """
    day, repository = _load()
    try:
        if archived:
            commitments = repository.get_archived_commitments()
        else:
            commitments = repository.get_active_commitments()
    except SnapshotFormatError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(1)

    commitments_view(
        day,
        "archived" if archived else "commitments",
        sort_commitments(commitments, day),
    )


def show(
    id: Annotated[str, typer.Argument(help="Commitment id")],
) -> None:
    """
    Show a commitment's highlights, timeline and sub-items.
    """
    day, repository = _load()
    try:
        commitment = repository.get_commitment(id)
    except (SnapshotFormatError, CommitmentNotFoundError) as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(1)

    single_commitment_view(day, commitment)


def agenda() -> None:
    """
    Show what needs attention across active commitments.
    """
    day, repository = _load()
    try:
        commitments = repository.get_active_commitments()
    except SnapshotFormatError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(1)

    agenda_view(day, sort_commitments(commitments, day))
