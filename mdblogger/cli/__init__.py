"""mdblogger CLI package."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

import click

from ..utils.logging_config import setup_logging
from . import browse_cmd, config_cmd, pull, push, transform, validate
from ._common import CONTEXT_SETTINGS, MdbloggerCliError

__all__ = ["cli", "main", "MdbloggerCliError"]


@click.group(context_settings=CONTEXT_SETTINGS)
@click.option(
    "-c",
    "--config",
    "config_path_opt",
    type=click.Path(path_type=Path),
    default=None,
    help="Path to configuration TOML file.",
)
@click.option(
    "-v",
    "--verbose",
    "verbosity",
    count=True,
    help="Increase log output (repeatable).",
)
@click.pass_context
def cli(ctx: click.Context, config_path_opt: Path | None, verbosity: int) -> None:
    """Publish vault notes into a static-site project."""

    ctx.ensure_object(dict)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.command.get_help(ctx))
        ctx.exit(0)

    setup_logging(verbosity)
    ctx.obj["config_path"] = config_path_opt


for register_command in (
    push.register,
    pull.register,
    validate.register,
    browse_cmd.register,
    transform.register,
    config_cmd.register,
):
    register_command(cli)


def main(argv: Sequence[str] | None = None) -> int:
    args = list(argv) if argv is not None else None
    try:
        result = cli.main(args=args, prog_name="mdb", standalone_mode=False)
    except click.ClickException as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.exceptions.Abort:
        click.echo("Aborted!", err=True)
        return 1
    except SystemExit as exc:
        return int(exc.code or 0)
    return result if isinstance(result, int) else 0
