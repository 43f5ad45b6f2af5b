"""Push commands for mdblogger CLI."""

from __future__ import annotations

from pathlib import Path

import click

from ..config import BatchPolicy
from ..errors import PublishError
from ..publish import (
    PushReport,
    get_publish_format_descriptions,
    push_file,
    push_folder,
    resolve_source,
)
from ._common import MdbloggerCliError, get_app, project_folder_or_option

_dest_option = click.option(
    "-d",
    "--dest",
    "destination",
    type=click.Path(path_type=Path, file_okay=False),
    default=None,
    help="Custom destination directory (defaults to the configured project folder).",
)


@click.command(name="push")
@click.argument("source", type=click.Path(path_type=Path, dir_okay=False))
@_dest_option
@click.option(
    "-f",
    "--format",
    "format_id",
    default="markdown",
    show_default=True,
    metavar="FORMAT",
    help="Publish format identifier.",
)
@click.pass_context
def push(
    ctx: click.Context, source: Path, destination: Path | None, format_id: str
) -> None:
    """Push the document SOURCE into the project folder."""

    app = get_app(ctx)
    source = resolve_source(source, app.config)
    try:
        outcome = push_file(
            source,
            project_folder_or_option(app, destination),
            config=app.config,
            format_id=format_id,
        )
    except PublishError as exc:
        raise MdbloggerCliError(str(exc)) from exc

    click.echo(f"Your file has been pushed! At {outcome.destination}")


@click.command(name="push-folder")
@click.argument("source", type=click.Path(path_type=Path, file_okay=False))
@_dest_option
@click.option(
    "-f",
    "--format",
    "format_id",
    default="mdx",
    show_default=True,
    metavar="FORMAT",
    help="Publish format used for Markdown files.",
)
@click.option(
    "--fail-fast",
    is_flag=True,
    help="Stop at the first failing file instead of skipping it.",
)
@click.pass_context
def push_folder_cmd(
    ctx: click.Context,
    source: Path,
    destination: Path | None,
    format_id: str,
    fail_fast: bool,
) -> None:
    """Publish the folder SOURCE into the project folder.

    Markdown files are transformed and written as MDX, subfolders and other
    files are copied as they are.
    """

    app = get_app(ctx)
    policy = BatchPolicy.ABORT if fail_fast else None
    try:
        report = push_folder(
            resolve_source(source, app.config),
            project_folder_or_option(app, destination),
            config=app.config,
            format_id=format_id,
            policy=policy,
        )
    except PublishError as exc:
        raise MdbloggerCliError(str(exc)) from exc

    _echo_report(report)
    if not report.ok:
        failed = len(report.failures)
        suffix = " (aborted)" if report.aborted else ""
        raise MdbloggerCliError(f"{failed} entries failed to publish{suffix}.")


@click.command(name="formats")
@click.pass_context
def formats(ctx: click.Context) -> None:
    """List available publish formats."""

    app = get_app(ctx)
    try:
        descriptions = get_publish_format_descriptions(app.config)
    except PublishError as exc:
        raise MdbloggerCliError(str(exc)) from exc

    if not descriptions:
        click.echo("No publish formats are available.")
        return
    click.echo("Available publish formats:\n")
    for fmt, desc in descriptions:
        click.echo(f"  - {fmt}: {desc}" if desc else f"  - {fmt}")


def _echo_report(report: PushReport) -> None:
    for outcome in report.failures:
        click.echo(f"  failed: {outcome.source}: {outcome.error}", err=True)
    click.echo(
        f"Your folder has been pushed! At {report.target} "
        f"({report.published_count} of {len(report.outcomes)} entries)"
    )


def register(cli: click.Group) -> None:
    """Register the commands with the root CLI group."""

    cli.add_command(push)
    cli.add_command(push_folder_cmd)
    cli.add_command(formats)
