"""Publish Markdown notes from a vault into a static-site project as MDX."""

from __future__ import annotations

from .blocks import BlockKind, classify_block, split_blocks
from .config import BatchPolicy, BloggerConfig, WrapperConfig
from .pipeline import TransformResult, transform_document, url_prefix_for
from .rewriter import RewriteResult, rewrite
from .wrapper import wrap

__version__ = "0.1.0"

__all__ = [
    "BatchPolicy",
    "BlockKind",
    "BloggerConfig",
    "RewriteResult",
    "TransformResult",
    "WrapperConfig",
    "classify_block",
    "rewrite",
    "split_blocks",
    "transform_document",
    "url_prefix_for",
    "wrap",
]
