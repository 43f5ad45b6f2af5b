"""Browse command for mdblogger CLI."""

from __future__ import annotations

from pathlib import Path

import click

from ..browse import list_entries
from ..errors import InvalidInputPathError
from ._common import MdbloggerCliError, get_app


@click.command(name="browse")
@click.argument(
    "directory",
    type=click.Path(path_type=Path, file_okay=False),
    default=Path.home(),
    required=False,
)
@click.option(
    "-n",
    "--name",
    "file_name",
    default=None,
    help="Also list a file with this name when present.",
)
@click.option(
    "-a",
    "--all",
    "show_all",
    is_flag=True,
    help="Include hidden folders regardless of configuration.",
)
@click.pass_context
def browse(
    ctx: click.Context, directory: Path, file_name: str | None, show_all: bool
) -> None:
    """List folders under DIRECTORY that can serve as a push or pull path."""

    app = get_app(ctx)
    show_hidden = show_all or app.config.show_hidden_folders
    try:
        entries = list_entries(directory, show_hidden=show_hidden, file_name=file_name)
    except InvalidInputPathError as exc:
        raise MdbloggerCliError(str(exc)) from exc

    click.echo(f"{directory.expanduser().resolve()}:")
    for entry in entries:
        click.echo(f"  {entry}")


def register(cli: click.Group) -> None:
    """Register the command with the root CLI group."""

    cli.add_command(browse)
