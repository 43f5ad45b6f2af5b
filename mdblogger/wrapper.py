"""Wrap document blocks in presentation components.

Consecutive plain paragraphs share one group container so the site renders
them with consistent spacing. Headings get a container of their own. Images,
front matter and custom components are emitted untouched because the site
renders them itself.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .blocks import Block, BlockKind, parse_blocks
from .config import DEFAULT_GROUP_TAG, DEFAULT_HEADING_TAG, WrapperConfig

logger = logging.getLogger(__name__)

UNIT_SEPARATOR = "\n\n"


def wrap(
    text: str,
    group_tag: str = DEFAULT_GROUP_TAG,
    heading_tag: str = DEFAULT_HEADING_TAG,
) -> str:
    """Return ``text`` with its blocks wrapped in ``group_tag``/``heading_tag``."""

    config = WrapperConfig(group_tag=group_tag, heading_tag=heading_tag)
    return UNIT_SEPARATOR.join(wrap_blocks(parse_blocks(text), config))


def wrap_blocks(blocks: Iterable[Block], config: WrapperConfig) -> list[str]:
    """Turn a block sequence into output units.

    ``pending`` holds the run of plain blocks not yet emitted; it is flushed
    by any heading or opaque block and at the end of the sequence.
    """

    units: list[str] = []
    pending: list[str] = []
    # Tag of an already wrapped region from a previous pass that is still open.
    open_tag: str | None = None

    def flush() -> None:
        if pending:
            units.append(_enclose(config.group_tag, UNIT_SEPARATOR.join(pending)))
            pending.clear()

    for item in blocks:
        block = item.text
        if open_tag is not None:
            units.append(block)
            if block.endswith(f"</{open_tag}>"):
                open_tag = None
            continue

        tag = _wrapped_tag(block, config)
        if tag is not None:
            flush()
            units.append(block)
            if not block.endswith(f"\n</{tag}>"):
                open_tag = tag
            continue

        logger.debug("Block classified as %s: %.40r", item.kind.value, block)
        if item.kind is BlockKind.HEADING:
            flush()
            units.append(_enclose(config.heading_tag, block))
        elif item.kind is BlockKind.OPAQUE:
            flush()
            units.append(block)
        else:
            pending.append(block)

    flush()
    return units


def _enclose(tag: str, content: str) -> str:
    return f"<{tag}>\n{content.strip()}\n</{tag}>"


def _wrapped_tag(block: str, config: WrapperConfig) -> str | None:
    """Return the wrapper tag ``block`` opens with, if any."""

    for tag in (config.group_tag, config.heading_tag):
        if block.startswith(f"<{tag}>\n"):
            return tag
    return None


__all__ = ["UNIT_SEPARATOR", "WrapperConfig", "wrap", "wrap_blocks"]
