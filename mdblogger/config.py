"""Configuration management for mdblogger."""

from __future__ import annotations

import re
import tomllib
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

DEFAULT_CONFIG_DIR = Path("~/.config/mdblogger").expanduser()
DEFAULT_CONFIG_PATH = DEFAULT_CONFIG_DIR / "config.toml"
DEFAULT_URL_PREFIX = "/work/{folder}/"
DEFAULT_GROUP_TAG = "ContentWrapper"
DEFAULT_HEADING_TAG = "HeadingWrapper"

_TAG_NAME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9-]*$")


class ConfigError(RuntimeError):
    """Base error for configuration related issues."""


class MissingConfigError(ConfigError):
    """Raised when the configuration file cannot be found."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Configuration file not found at {path}")
        self.path = path


class InvalidConfigError(ConfigError):
    """Raised when the configuration file misses required keys or values."""


class BatchPolicy(str, Enum):
    """What a multi-file publish does when one file fails."""

    SKIP = "skip"
    ABORT = "abort"


@dataclass(slots=True, frozen=True)
class WrapperConfig:
    """Tag names used by the block wrapper."""

    group_tag: str = DEFAULT_GROUP_TAG
    heading_tag: str = DEFAULT_HEADING_TAG


@dataclass(slots=True, frozen=True)
class BloggerConfig:
    """In-memory representation of the mdblogger configuration file."""

    project_folder: Path | None = None
    vault_root: Path | None = None
    show_hidden_folders: bool = False
    url_prefix: str = DEFAULT_URL_PREFIX
    on_error: BatchPolicy = BatchPolicy.SKIP
    wrapper: WrapperConfig = field(default_factory=WrapperConfig)
    plugins: dict[str, dict[str, Any]] = field(default_factory=dict)
    source_path: Path | None = None


def load_config(path: Path | None = None) -> BloggerConfig:
    """Load configuration from ``path`` or the default location.

    Parameters
    ----------
    path:
        Optional location of the configuration file. When ``None`` the default
        path (``~/.config/mdblogger/config.toml``) is used.

    Raises
    ------
    MissingConfigError
        If the file cannot be found.
    InvalidConfigError
        If settings are malformed.
    """

    config_path = (path or DEFAULT_CONFIG_PATH).expanduser()
    if not config_path.exists():
        raise MissingConfigError(config_path)

    with config_path.open("rb") as fh:
        try:
            raw = tomllib.load(fh)
        except tomllib.TOMLDecodeError as exc:
            raise InvalidConfigError(f"Invalid TOML in {config_path}: {exc}") from exc

    blogger_section = raw.get("blogger", {})
    if not isinstance(blogger_section, dict):
        raise InvalidConfigError("'blogger' section must be a table")

    config_dir = config_path.parent

    project_folder = _optional_path(blogger_section, "project_folder", config_dir)
    vault_root = _optional_path(blogger_section, "vault_root", config_dir)

    show_hidden = blogger_section.get("show_hidden_folders", False)
    if not isinstance(show_hidden, bool):
        raise InvalidConfigError("'show_hidden_folders' must be a boolean")

    url_prefix = blogger_section.get("url_prefix", DEFAULT_URL_PREFIX)
    if not isinstance(url_prefix, str) or "{folder}" not in url_prefix:
        raise InvalidConfigError("'url_prefix' must be a string containing '{folder}'")

    on_error_raw = blogger_section.get("on_error", BatchPolicy.SKIP.value)
    try:
        on_error = BatchPolicy(str(on_error_raw).strip().lower())
    except ValueError as exc:
        choices = ", ".join(policy.value for policy in BatchPolicy)
        raise InvalidConfigError(f"'on_error' must be one of: {choices}") from exc

    wrapper = _load_wrapper(raw.get("wrapper"))

    plugins_section = raw.get("plugins")
    plugins: dict[str, dict[str, Any]] = {}
    if isinstance(plugins_section, dict):
        for key, value in plugins_section.items():
            plugins[key] = dict(value) if isinstance(value, dict) else {}

    return BloggerConfig(
        project_folder=project_folder,
        vault_root=vault_root,
        show_hidden_folders=show_hidden,
        url_prefix=url_prefix,
        on_error=on_error,
        wrapper=wrapper,
        plugins=plugins,
        source_path=config_path,
    )


def _optional_path(section: dict[str, Any], key: str, base_dir: Path) -> Path | None:
    value = section.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise InvalidConfigError(f"'{key}' must be a string when provided")
    value = value.strip()
    if not value:
        return None
    # Relative paths are resolved against the configuration directory.
    candidate = Path(value).expanduser()
    return (candidate if candidate.is_absolute() else base_dir / candidate).resolve()


def _load_wrapper(section: object) -> WrapperConfig:
    if section is None:
        return WrapperConfig()
    if not isinstance(section, dict):
        raise InvalidConfigError("'wrapper' section must be a table")

    group_tag = section.get("group_tag", DEFAULT_GROUP_TAG)
    heading_tag = section.get("heading_tag", DEFAULT_HEADING_TAG)
    for key, value in (("group_tag", group_tag), ("heading_tag", heading_tag)):
        if not isinstance(value, str) or not _TAG_NAME_RE.match(value):
            raise InvalidConfigError(
                f"'{key}' must be a component name (letters, digits and '-')"
            )
    return WrapperConfig(group_tag=group_tag, heading_tag=heading_tag)


def bootstrap_config_file(path: Path) -> bool:
    """Create a default config file if missing.

    Returns True when the file was created, False if it already existed.
    """

    if path.exists():
        return False

    config_dir = path.parent
    config_dir.mkdir(parents=True, exist_ok=True)
    default_content = (
        "[blogger]\n"
        'project_folder = ""\n'
        "show_hidden_folders = false\n"
        f'url_prefix = "{DEFAULT_URL_PREFIX}"\n'
        'on_error = "skip"\n'
        "\n"
        "[wrapper]\n"
        f'group_tag = "{DEFAULT_GROUP_TAG}"\n'
        f'heading_tag = "{DEFAULT_HEADING_TAG}"\n'
    )
    path.write_text(default_content, encoding="utf-8")
    return True
