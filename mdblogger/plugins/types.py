"""Type definitions for mdblogger plugin contracts."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

from ..config import WrapperConfig


@dataclass(slots=True, frozen=True)
class PublishContext:
    """Per-document values a renderer may need."""

    url_prefix: str
    wrapper: WrapperConfig = field(default_factory=WrapperConfig)


class DocumentRenderer(Protocol):
    """Callable turning a source document into its published text."""

    def __call__(
        self, text: str, *, context: PublishContext
    ) -> str:  # pragma: no cover - Protocol
        """Return the published text for ``text``."""


@dataclass(slots=True, frozen=True)
class PublishFormat:
    """Descriptor of a publish format provided by a plugin.

    ``extension`` replaces the source file suffix on write; ``None`` keeps it.
    """

    format_id: str
    render: DocumentRenderer
    description: str
    extension: str | None = None
