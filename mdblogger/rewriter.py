"""Front matter and image link rewriting for published documents.

Documents authored in the vault reference images relative to their folder
(``![alt](images/a.png)``) and declare a cover image as a wiki-link
(``cover_url: "[[cover.png]]"``). The site serves each published folder under
a URL prefix such as ``/work/<folder>/``; both kinds of reference are
rewritten onto that prefix.
"""

from __future__ import annotations

import logging
import posixpath
import re
from dataclasses import dataclass

from .frontmatter import render_document, split_front_matter

logger = logging.getLogger(__name__)

COVER_URL_KEY = "cover_url"

_IMAGE_LINK_RE = re.compile(r"(?P<head>!\[[^\]]*\]\()(?P<path>images/[^)]+)\)")
# Detection and replacement share this pattern so that every value judged
# eligible is also the value that gets substituted.
_COVER_URL_RE = re.compile(
    rf"^{COVER_URL_KEY}:[ \t]*(?P<value>.*?)[ \t]*$",
    re.MULTILINE,
)
_QUOTES = ("'", '"')


@dataclass(slots=True, frozen=True)
class RewriteResult:
    """Updated front matter, body and the reassembled document."""

    front_matter: str
    body: str
    final_text: str


def rewrite(source_text: str, url_prefix: str) -> RewriteResult:
    """Rewrite image links and ``cover_url`` of ``source_text``.

    The result always carries a front matter block, even when the source had
    none, and that block always holds a ``cover_url`` key.
    """

    text = rewrite_image_links(source_text, url_prefix)
    split = split_front_matter(text)
    if not split.present:
        logger.debug("No front matter found; starting from an empty block")

    front_matter = rewrite_cover_url(split.front_matter, url_prefix)
    return RewriteResult(
        front_matter=front_matter,
        body=split.body,
        final_text=render_document(front_matter, split.body),
    )


def rewrite_image_links(text: str, url_prefix: str) -> str:
    """Prefix every ``![alt](images/...)`` target with ``url_prefix``."""

    def _prefix(match: re.Match[str]) -> str:
        return f"{match.group('head')}{url_prefix}{match.group('path')})"

    return _IMAGE_LINK_RE.sub(_prefix, text)


def rewrite_cover_url(front_matter: str, url_prefix: str) -> str:
    """Resolve a vault-relative ``cover_url`` or append an empty one."""

    match = _COVER_URL_RE.search(front_matter)
    if match is None:
        return f"{front_matter}\n{COVER_URL_KEY}: "

    value = match.group("value")
    resolved = resolve_cover_url(value, url_prefix)
    if resolved == value:
        return front_matter

    logger.debug("Rewriting %s %r -> %r", COVER_URL_KEY, value, resolved)
    return (
        front_matter[: match.start()]
        + f"{COVER_URL_KEY}: {resolved}"
        + front_matter[match.end() :]
    )


def resolve_cover_url(value: str, url_prefix: str) -> str:
    """Return the site path for a ``cover_url`` value.

    Values that are absolute URLs or absolute paths once quotes and wiki-link
    brackets are removed are returned unchanged, as are empty ones.
    """

    target = _strip_wiki_link(value)
    if not target or target.startswith("http") or target.startswith("/"):
        return value
    return posixpath.normpath(posixpath.join(url_prefix, target))


def _strip_wiki_link(value: str) -> str:
    target = value.strip()
    if len(target) >= 2 and target[0] == target[-1] and target[0] in _QUOTES:
        target = target[1:-1].strip()
    if target.startswith("[[") and target.endswith("]]"):
        target = target[2:-2]
        # [[cover.png|alias]] names the file before the pipe.
        target = target.split("|", 1)[0]
    return target.strip()


__all__ = [
    "COVER_URL_KEY",
    "RewriteResult",
    "resolve_cover_url",
    "rewrite",
    "rewrite_cover_url",
    "rewrite_image_links",
]
