"""Shared helpers for mdblogger CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import click

from ..app import AppContext, bootstrap
from ..config import ConfigError, MissingConfigError

CONTEXT_SETTINGS: dict[str, Any] = {"help_option_names": ["-h", "--help"]}


class MdbloggerCliError(click.ClickException):
    """Shared Click exception wrapper for CLI failures."""


def get_app(ctx: click.Context) -> AppContext:
    """Return a cached AppContext for the current CLI invocation."""

    app: AppContext | None = ctx.obj.get("app")
    if app is not None:
        return app

    config_path_opt: Path | None = ctx.obj.get("config_path")

    try:
        app = bootstrap(config_path_opt)
    except MissingConfigError as exc:
        raise MdbloggerCliError(
            f"Configuration not found at {exc.path}. Run 'mdb config' to create it."
        ) from exc
    except ConfigError as exc:
        raise MdbloggerCliError(str(exc)) from exc

    ctx.obj["app"] = app
    return app


def project_folder_or_option(app: AppContext, option: Path | None) -> Path | None:
    """Prefer an explicit ``--dest``/``--source`` over the configured folder."""

    return option if option is not None else app.config.project_folder
