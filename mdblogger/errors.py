"""Error types raised by the mdblogger publishing pipeline."""

from __future__ import annotations

from pathlib import Path


class PublishError(RuntimeError):
    """Base error for publishing failures."""


class InvalidInputPathError(PublishError):
    """Raised when a configured source or destination path does not exist."""

    def __init__(self, path: Path | None, role: str = "path") -> None:
        if path is None:
            message = f"No {role} configured."
        else:
            message = f"The {role} does not exist: {path}"
        super().__init__(message)
        self.path = path
        self.role = role


class TransformError(PublishError):
    """Raised when a document cannot be rewritten or wrapped."""


class FileIOError(PublishError):
    """Raised when reading, writing or copying a file fails."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


__all__ = [
    "FileIOError",
    "InvalidInputPathError",
    "PublishError",
    "TransformError",
]
