"""Preview commands for mdblogger CLI: transform and inspect."""

from __future__ import annotations

from pathlib import Path

import click
import yaml

from ..blocks import parse_blocks
from ..errors import TransformError
from ..frontmatter import parse_metadata, split_front_matter
from ..pipeline import transform_document, url_prefix_for
from ._common import MdbloggerCliError, get_app

_file_argument = click.argument(
    "source", type=click.Path(path_type=Path, dir_okay=False, exists=True)
)


def _read(source: Path) -> str:
    try:
        return source.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise MdbloggerCliError(f"Unable to read {source}: {exc}") from exc


@click.command(name="transform")
@_file_argument
@click.option(
    "-p",
    "--prefix",
    "url_prefix",
    default=None,
    help="URL prefix for images (defaults to one derived from the parent folder).",
)
@click.pass_context
def transform(ctx: click.Context, source: Path, url_prefix: str | None) -> None:
    """Print the published form of SOURCE without writing anything."""

    app = get_app(ctx)
    if url_prefix is None:
        url_prefix = url_prefix_for(
            source.resolve().parent.name, app.config.url_prefix
        )

    try:
        result = transform_document(_read(source), url_prefix, app.config.wrapper)
    except TransformError as exc:
        raise MdbloggerCliError(str(exc)) from exc

    click.echo(result.text)


@click.command(name="inspect")
@_file_argument
def inspect(source: Path) -> None:
    """Show the front matter and block classification of SOURCE."""

    text = _read(source)
    split = split_front_matter(text)

    if split.present:
        metadata = parse_metadata(split.front_matter)
        click.echo("Front matter:")
        if metadata:
            dumped = yaml.safe_dump(
                metadata, sort_keys=False, allow_unicode=True
            ).rstrip()
            click.echo("\n".join(f"  {line}" for line in dumped.splitlines()))
        else:
            click.echo("  (empty or not valid YAML)")
    else:
        click.echo("Front matter: (none)")

    click.echo("\nBlocks:")
    for index, block in enumerate(parse_blocks(text), start=1):
        first_line = block.text.splitlines()[0]
        click.echo(f"  {index:>3}  {block.kind.value:<8} {first_line[:60]}")


def register(cli: click.Group) -> None:
    """Register the commands with the root CLI group."""

    cli.add_command(transform)
    cli.add_command(inspect)
