"""Built-in MDX publish format: rewrite references and wrap blocks."""

from __future__ import annotations

from ...config import BloggerConfig
from ...pipeline import transform_document
from .._markers import hookimpl
from ..types import PublishContext, PublishFormat

PLUGIN_ID = "mdblogger-builtin-mdx"


def _render_mdx(text: str, *, context: PublishContext) -> str:
    return transform_document(text, context.url_prefix, context.wrapper).text


@hookimpl
def publish_formats(config: BloggerConfig) -> tuple[PublishFormat, ...]:
    """Expose the MDX pipeline as a publish format."""

    _ = config  # wrapper tags travel through PublishContext
    return (
        PublishFormat(
            format_id="mdx",
            render=_render_mdx,
            description="MDX with site image URLs and wrapper components",
            extension=".mdx",
        ),
    )
