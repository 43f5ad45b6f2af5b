"""Validate command for mdblogger CLI."""

from __future__ import annotations

import click

from ..errors import InvalidInputPathError
from ..publish import validate_project_folder
from ._common import MdbloggerCliError, get_app


@click.command(name="validate")
@click.pass_context
def validate(ctx: click.Context) -> None:
    """Check that the configured project folder exists."""

    app = get_app(ctx)
    try:
        folder = validate_project_folder(app.config.project_folder)
    except InvalidInputPathError as exc:
        raise MdbloggerCliError(
            f"{exc} Create the folder or update 'project_folder' with 'mdb config'."
        ) from exc

    click.echo(f"Valid path: {folder}")


def register(cli: click.Group) -> None:
    """Register the command with the root CLI group."""

    cli.add_command(validate)
