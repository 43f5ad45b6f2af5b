"""Built-in verbatim Markdown publish format."""

from __future__ import annotations

from ...config import BloggerConfig
from .._markers import hookimpl
from ..types import PublishContext, PublishFormat

PLUGIN_ID = "mdblogger-builtin-markdown"


def _render_verbatim(text: str, *, context: PublishContext) -> str:
    _ = context  # the document is published as authored
    return text


@hookimpl
def publish_formats(config: BloggerConfig) -> tuple[PublishFormat, ...]:
    """Expose verbatim copying as a publish format."""

    _ = config
    return (
        PublishFormat(
            format_id="markdown",
            render=_render_verbatim,
            description="Document copied as authored",
        ),
    )
