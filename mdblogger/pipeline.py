"""Document transformation pipeline: rewrite references, then wrap blocks."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .config import DEFAULT_URL_PREFIX, WrapperConfig
from .errors import TransformError
from .rewriter import rewrite
from .wrapper import wrap

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class TransformResult:
    """Final document text plus the intermediate rewrite parts."""

    text: str
    front_matter: str
    body: str


def url_prefix_for(folder_name: str, template: str = DEFAULT_URL_PREFIX) -> str:
    """Return the site URL prefix for documents published from ``folder_name``."""

    return template.format(folder=folder_name)


def transform_document(
    text: str,
    url_prefix: str,
    wrapper: WrapperConfig | None = None,
) -> TransformResult:
    """Convert an authored Markdown document into the published MDX text.

    Raises
    ------
    TransformError
        If the document cannot be rewritten or wrapped.
    """

    wrapper = wrapper or WrapperConfig()
    try:
        rewritten = rewrite(text, url_prefix)
        final_text = wrap(
            rewritten.final_text,
            group_tag=wrapper.group_tag,
            heading_tag=wrapper.heading_tag,
        )
    except (TypeError, ValueError, AttributeError) as exc:
        raise TransformError(f"Unable to transform document: {exc}") from exc

    logger.debug("Transformed document with prefix %s", url_prefix)
    return TransformResult(
        text=final_text,
        front_matter=rewritten.front_matter,
        body=rewritten.body,
    )


__all__ = ["TransformResult", "transform_document", "url_prefix_for"]
