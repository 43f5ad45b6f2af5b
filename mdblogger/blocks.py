"""Blank-line block splitting and classification."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from .frontmatter import split_front_matter

_BLOCK_SEPARATOR_RE = re.compile(r"\n\s*\n")

_HEADING_RE = re.compile(r"^#{1,2}[ \t]+\S", re.MULTILINE)
_FRONTMATTER_BLOCK_RE = re.compile(r"^---.*?---$", re.MULTILINE | re.DOTALL)
_IMAGE_LINE_RE = re.compile(r"^!\[[^\n]*?\]\([^\n]*?\)$", re.MULTILINE)
# Custom component tags, self-closing ones included: <Gallery items={x} />
_COMPONENT_RE = re.compile(r"<([a-zA-Z0-9-]+)([^>]*?)(/?)>")


class BlockKind(str, Enum):
    HEADING = "heading"
    OPAQUE = "opaque"
    PLAIN = "plain"


@dataclass(slots=True, frozen=True)
class Block:
    text: str
    kind: BlockKind


def split_blocks(text: str) -> list[str]:
    """Split ``text`` into trimmed blocks separated by blank lines.

    A leading front matter block is kept whole, even when it contains blank
    lines. Empty blocks are dropped.
    """

    blocks: list[str] = []
    split = split_front_matter(text)
    if split.present:
        blocks.append(split.fenced_block)
        text = split.body

    for piece in _BLOCK_SEPARATOR_RE.split(text):
        trimmed = piece.strip()
        if trimmed:
            blocks.append(trimmed)
    return blocks


def classify_block(text: str) -> BlockKind:
    """Classify a block; headings win over everything else."""

    if _HEADING_RE.search(text):
        return BlockKind.HEADING
    if (
        _FRONTMATTER_BLOCK_RE.search(text)
        or _IMAGE_LINE_RE.search(text)
        or _COMPONENT_RE.search(text)
    ):
        return BlockKind.OPAQUE
    return BlockKind.PLAIN


def parse_blocks(text: str) -> list[Block]:
    """Split and classify ``text``; leading front matter is always opaque."""

    blocks = split_blocks(text)
    parsed: list[Block] = []
    if blocks and split_front_matter(text).present:
        parsed.append(Block(text=blocks.pop(0), kind=BlockKind.OPAQUE))
    parsed.extend(Block(text=block, kind=classify_block(block)) for block in blocks)
    return parsed


__all__ = ["Block", "BlockKind", "classify_block", "parse_blocks", "split_blocks"]
