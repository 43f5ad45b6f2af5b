"""Front matter splitting and rendering for published documents."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

import yaml

FRONTMATTER_DELIM = "---"

# Opening fence at offset 0, closing fence on a line of its own. The newline
# after the closing fence belongs to the fence, not to the body.
_FRONTMATTER_RE = re.compile(
    r"\A---\n(?:(?P<content>.*?)\n)?---[ \t]*(?:\n|\Z)",
    re.DOTALL,
)


@dataclass(slots=True, frozen=True)
class FrontMatterSplit:
    """Outcome of separating a document into front matter and body."""

    front_matter: str
    body: str
    present: bool
    # Front matter with its fences exactly as written, or "" when absent.
    fenced_block: str = ""


def split_front_matter(text: str) -> FrontMatterSplit:
    """Split ``text`` into its front matter block and body.

    A document without an opening fence, or whose opening fence is never
    closed, has no front matter: the whole text is the body.
    """

    match = _FRONTMATTER_RE.match(text)
    if match is None:
        return FrontMatterSplit(front_matter="", body=text, present=False)
    return FrontMatterSplit(
        front_matter=match.group("content") or "",
        body=text[match.end() :],
        present=True,
        fenced_block=text[: match.end()].rstrip("\n"),
    )


def render_document(front_matter: str, body: str) -> str:
    return f"{FRONTMATTER_DELIM}\n{front_matter}\n{FRONTMATTER_DELIM}\n{body}"


def parse_metadata(front_matter: str) -> dict[str, Any]:
    """Load front matter as YAML for reporting purposes.

    Invalid YAML or a non-mapping document yields an empty dict.
    """

    try:
        loaded = yaml.safe_load(front_matter) or {}
    except yaml.YAMLError:
        return {}
    if not isinstance(loaded, dict):
        return {}
    return loaded


__all__ = [
    "FRONTMATTER_DELIM",
    "FrontMatterSplit",
    "parse_metadata",
    "render_document",
    "split_front_matter",
]
