"""Application bootstrap and context container for mdblogger."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from .config import BloggerConfig, MissingConfigError, load_config

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class AppContext:
    """Aggregates configuration for the CLI lifecycle."""

    config: BloggerConfig


def bootstrap(config_path: Path | None) -> AppContext:
    """Load configuration, falling back to defaults when none exists.

    An explicitly requested ``config_path`` must exist.
    """

    try:
        config = load_config(config_path)
    except MissingConfigError as exc:
        if config_path is not None:
            raise
        logger.info("%s; using default settings", exc)
        config = BloggerConfig()
    return AppContext(config=config)
