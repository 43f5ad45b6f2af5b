"""Hook specifications for mdblogger plugins."""

from __future__ import annotations

from collections.abc import Iterable

from ..config import BloggerConfig
from ._markers import hookspec
from .types import PublishFormat


class MdbloggerHookSpec:
    """Collection of pluggy hook specifications."""

    @hookspec
    def publish_formats(self, config: BloggerConfig) -> Iterable[PublishFormat]:
        """Return publish format contributions provided by the plugin."""
