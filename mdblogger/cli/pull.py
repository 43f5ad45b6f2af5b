"""Pull command for mdblogger CLI."""

from __future__ import annotations

from pathlib import Path

import click

from ..errors import PublishError
from ..publish import pull_file, resolve_source
from ._common import MdbloggerCliError, get_app, project_folder_or_option


@click.command(name="pull")
@click.argument("target", type=click.Path(path_type=Path, dir_okay=False))
@click.option(
    "-s",
    "--source",
    "source_dir",
    type=click.Path(path_type=Path, file_okay=False),
    default=None,
    help="Custom directory to pull from (defaults to the configured project folder).",
)
@click.option(
    "-y",
    "--yes",
    "assume_yes",
    is_flag=True,
    help="Overwrite TARGET without asking.",
)
@click.pass_context
def pull(
    ctx: click.Context, target: Path, source_dir: Path | None, assume_yes: bool
) -> None:
    """Replace TARGET with the project copy of the same name."""

    app = get_app(ctx)
    target = resolve_source(target, app.config)
    if target.exists() and not assume_yes:
        confirm = click.confirm(
            f"Overwrite {target}?", default=False, show_default=True
        )
        if not confirm:
            raise MdbloggerCliError("Pull aborted.")

    try:
        remote = pull_file(target, project_folder_or_option(app, source_dir))
    except PublishError as exc:
        raise MdbloggerCliError(str(exc)) from exc

    click.echo(f"Your file has been pulled! From {remote}")


def register(cli: click.Group) -> None:
    """Register the command with the root CLI group."""

    cli.add_command(pull)
