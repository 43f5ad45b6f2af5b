"""Publishing services: push documents and folders into the site project."""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from .config import BatchPolicy, BloggerConfig
from .errors import FileIOError, InvalidInputPathError, PublishError, TransformError
from .pipeline import url_prefix_for
from .plugins import (
    PluginRegistrationError,
    PublishContext,
    PublishFormat,
    load_publish_formats,
)

logger = logging.getLogger(__name__)

MARKDOWN_SUFFIXES = (".md", ".mdx")


class FileAction(str, Enum):
    TRANSFORMED = "transformed"
    COPIED = "copied"
    COPIED_TREE = "copied-tree"


@dataclass(slots=True)
class FileOutcome:
    """Result of publishing one entry of a folder."""

    source: Path
    destination: Path
    action: FileAction
    error: PublishError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(slots=True)
class PushReport:
    """Aggregate result of a folder push."""

    source: Path
    target: Path
    outcomes: list[FileOutcome] = field(default_factory=list)
    aborted: bool = False

    @property
    def failures(self) -> list[FileOutcome]:
        return [outcome for outcome in self.outcomes if not outcome.ok]

    @property
    def ok(self) -> bool:
        return not self.aborted and not self.failures

    @property
    def published_count(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.ok)


def get_publish_format(config: BloggerConfig, format_id: str) -> PublishFormat:
    """Return the publish format registered under ``format_id``."""

    try:
        formats = load_publish_formats(config)
    except PluginRegistrationError as exc:
        raise PublishError(str(exc)) from exc

    contribution = formats.get(format_id.lower())
    if contribution is None:
        available = ", ".join(sorted(formats))
        if available:
            raise PublishError(
                f"Unknown publish format: {format_id}. Available: {available}."
            )
        raise PublishError("No publish formats are available.")
    return contribution


def get_publish_format_descriptions(config: BloggerConfig) -> list[tuple[str, str]]:
    """Return tuples of ``(format_id, description)`` for available formats."""

    try:
        formats = load_publish_formats(config)
    except PluginRegistrationError as exc:
        raise PublishError(str(exc)) from exc
    return sorted(
        ((fmt, contribution.description) for fmt, contribution in formats.items()),
        key=lambda item: item[0],
    )


def validate_project_folder(path: Path | None) -> Path:
    """Return ``path`` when it is an existing directory."""

    return _require_directory(path, "project folder")


def resolve_source(path: Path, config: BloggerConfig) -> Path:
    """Resolve a relative source path against the configured vault root."""

    if path.is_absolute() or config.vault_root is None:
        return path
    return config.vault_root / path


def push_folder(
    source_dir: Path,
    project_folder: Path | None,
    *,
    config: BloggerConfig,
    format_id: str = "mdx",
    policy: BatchPolicy | None = None,
) -> PushReport:
    """Publish ``source_dir`` into ``project_folder / source_dir.name``.

    Markdown entries go through the publish format, subdirectories are copied
    verbatim and other files are byte-copied. Failures are recorded per
    entry; with ``BatchPolicy.ABORT`` the first one stops the batch.
    """

    source_dir = _require_directory(source_dir, "source folder")
    project_folder = validate_project_folder(project_folder)
    publish_format = get_publish_format(config, format_id)
    policy = policy or config.on_error

    target = project_folder / source_dir.name
    report = PushReport(source=source_dir, target=target)
    try:
        target.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise FileIOError(target, exc.strerror or str(exc)) from exc

    context = PublishContext(
        url_prefix=url_prefix_for(source_dir.name, config.url_prefix),
        wrapper=config.wrapper,
    )

    # Destination -> entry that claimed it during this push.
    claimed: dict[Path, Path] = {}
    for entry in sorted(source_dir.iterdir()):
        action, destination = _plan_entry(entry, target, publish_format)
        if destination in claimed:
            error = FileIOError(
                entry,
                f"{destination} is already published from {claimed[destination]}",
            )
            outcome = FileOutcome(entry, destination, action, error)
        else:
            claimed[destination] = entry
            outcome = _publish_entry(
                entry, action, destination, publish_format, context
            )
        report.outcomes.append(outcome)
        if outcome.ok:
            logger.info("%s %s -> %s", outcome.action.value, entry, outcome.destination)
            continue

        logger.warning("Failed to publish %s: %s", entry, outcome.error)
        if policy is BatchPolicy.ABORT:
            report.aborted = True
            break

    return report


def push_file(
    source_file: Path,
    project_folder: Path | None,
    *,
    config: BloggerConfig,
    format_id: str = "markdown",
) -> FileOutcome:
    """Publish a single document into ``project_folder``.

    Raises
    ------
    InvalidInputPathError
        If the project folder or the source file does not exist.
    TransformError, FileIOError
        If rendering or writing the document fails.
    """

    project_folder = validate_project_folder(project_folder)
    source_file = source_file.expanduser().resolve()
    if not source_file.is_file():
        raise InvalidInputPathError(source_file, "source file")
    publish_format = get_publish_format(config, format_id)

    context = PublishContext(
        url_prefix=url_prefix_for(source_file.parent.name, config.url_prefix),
        wrapper=config.wrapper,
    )
    destination = _document_destination(source_file, project_folder, publish_format)
    outcome = _publish_document(source_file, destination, publish_format, context)
    if outcome.error is not None:
        raise outcome.error
    logger.info("Pushed %s -> %s", source_file, outcome.destination)
    return outcome


def pull_file(local_file: Path, project_folder: Path | None) -> Path:
    """Overwrite ``local_file`` with its namesake from ``project_folder``."""

    project_folder = validate_project_folder(project_folder)
    remote = project_folder / local_file.name
    if not remote.is_file():
        raise InvalidInputPathError(remote, "project copy")

    text = _read_text(remote)
    _write_text(local_file, text)
    logger.info("Pulled %s -> %s", remote, local_file)
    return remote


def _plan_entry(
    entry: Path, target: Path, publish_format: PublishFormat
) -> tuple[FileAction, Path]:
    if entry.is_dir():
        return FileAction.COPIED_TREE, target / entry.name
    if entry.suffix.lower() in MARKDOWN_SUFFIXES:
        return FileAction.TRANSFORMED, _document_destination(
            entry, target, publish_format
        )
    return FileAction.COPIED, target / entry.name


def _publish_entry(
    entry: Path,
    action: FileAction,
    destination: Path,
    publish_format: PublishFormat,
    context: PublishContext,
) -> FileOutcome:
    if action is FileAction.COPIED_TREE:
        try:
            shutil.copytree(entry, destination, dirs_exist_ok=True)
        except (OSError, shutil.Error) as exc:
            error = FileIOError(entry, str(exc))
            return FileOutcome(entry, destination, action, error)
        return FileOutcome(entry, destination, action)

    if action is FileAction.TRANSFORMED:
        return _publish_document(entry, destination, publish_format, context)

    try:
        shutil.copyfile(entry, destination)
    except OSError as exc:
        error = FileIOError(entry, exc.strerror or str(exc))
        return FileOutcome(entry, destination, action, error)
    return FileOutcome(entry, destination, action)


def _document_destination(
    source: Path, target_dir: Path, publish_format: PublishFormat
) -> Path:
    destination = target_dir / source.name
    if publish_format.extension is not None:
        destination = destination.with_suffix(publish_format.extension)
    return destination


def _publish_document(
    source: Path,
    destination: Path,
    publish_format: PublishFormat,
    context: PublishContext,
) -> FileOutcome:
    try:
        text = _read_text(source)
        try:
            rendered = publish_format.render(text, context=context)
        except TransformError:
            raise
        except Exception as exc:
            raise TransformError(
                f"Format '{publish_format.format_id}' failed on {source}: {exc}"
            ) from exc
        _write_text(destination, rendered)
    except PublishError as exc:
        return FileOutcome(source, destination, FileAction.TRANSFORMED, exc)
    return FileOutcome(source, destination, FileAction.TRANSFORMED)


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise FileIOError(path, f"not valid UTF-8 ({exc.reason})") from exc
    except OSError as exc:
        raise FileIOError(path, exc.strerror or str(exc)) from exc


def _write_text(path: Path, text: str) -> None:
    try:
        path.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise FileIOError(path, exc.strerror or str(exc)) from exc


def _require_directory(path: Path | None, role: str) -> Path:
    if path is None:
        raise InvalidInputPathError(None, role)
    resolved = path.expanduser().resolve()
    if not resolved.is_dir():
        raise InvalidInputPathError(resolved, role)
    return resolved


__all__ = [
    "FileAction",
    "FileOutcome",
    "MARKDOWN_SUFFIXES",
    "PushReport",
    "get_publish_format",
    "get_publish_format_descriptions",
    "pull_file",
    "push_file",
    "push_folder",
    "resolve_source",
    "validate_project_folder",
]
