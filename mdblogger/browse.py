"""Directory listing used to pick a custom push or pull location."""

from __future__ import annotations

from pathlib import Path

from .errors import InvalidInputPathError

PARENT_ENTRY = ".."


def list_entries(
    directory: Path,
    *,
    show_hidden: bool = False,
    file_name: str | None = None,
) -> list[str]:
    """List the entries a user can pick from inside ``directory``.

    Child directories come first (sorted), followed by ``file_name`` when a
    file of that name exists there, and finally the parent entry ``..``.
    Dot-prefixed names are left out unless ``show_hidden`` is set.
    """

    directory = directory.expanduser()
    if not directory.is_dir():
        raise InvalidInputPathError(directory, "directory")

    entries: list[str] = []
    for child in sorted(directory.iterdir(), key=lambda p: p.name):
        if child.name.startswith(".") and not show_hidden:
            continue
        try:
            is_dir = child.is_dir()
            is_match = file_name is not None and child.name == file_name and child.is_file()
        except OSError:
            continue
        if is_dir or is_match:
            entries.append(child.name)

    entries.append(PARENT_ENTRY)
    return entries


__all__ = ["PARENT_ENTRY", "list_entries"]
