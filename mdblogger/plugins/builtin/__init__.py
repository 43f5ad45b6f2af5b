"""Built-in mdblogger plugins."""

from __future__ import annotations

from . import markdown, mdx

BUILTIN_PLUGINS = (markdown, mdx)

__all__ = ["BUILTIN_PLUGINS"]
