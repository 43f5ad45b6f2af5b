"""Helpers for creating and working with the mdblogger plugin manager."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from functools import lru_cache

import pluggy

from ..config import BloggerConfig
from ._markers import ENTRY_POINT_GROUP, PLUGIN_NAMESPACE
from .spec import MdbloggerHookSpec
from .types import PublishFormat


class PluginRegistrationError(RuntimeError):
    """Raised when a plugin fails validation or registration."""


def create_plugin_manager(*, load_entry_points: bool = True) -> pluggy.PluginManager:
    """Instantiate a pluggy ``PluginManager`` configured for mdblogger."""

    manager = pluggy.PluginManager(PLUGIN_NAMESPACE)
    manager.add_hookspecs(MdbloggerHookSpec)

    if load_entry_points:
        manager.load_setuptools_entrypoints(ENTRY_POINT_GROUP)

    return manager


def register_modules(
    manager: pluggy.PluginManager,
    modules: Sequence[object],
) -> None:
    """Register in-process plugin modules with the manager."""

    for module in modules:
        try:
            manager.register(module)
        except pluggy.PluginValidationError as exc:
            raise PluginRegistrationError(str(exc)) from exc


def iter_publish_formats(
    manager: pluggy.PluginManager,
    config: BloggerConfig,
) -> Iterator[PublishFormat]:
    """Yield publish format contributions from all registered plugins."""

    for contributions in manager.hook.publish_formats(config=config):
        if not contributions:
            continue
        yield from _ensure_iterable(contributions)


def iter_plugin_modules() -> tuple[object, ...]:
    """Return plugin modules bundled with mdblogger."""

    from .builtin import BUILTIN_PLUGINS

    return BUILTIN_PLUGINS


@lru_cache(maxsize=1)
def _build_plugin_manager() -> pluggy.PluginManager:
    manager = create_plugin_manager()
    register_modules(manager, iter_plugin_modules())
    return manager


def get_plugin_manager() -> pluggy.PluginManager:
    """Return the cached plugin manager instance."""

    return _build_plugin_manager()


def reset_plugin_manager_cache() -> None:
    """Clear cached plugin manager so future calls rebuild state."""

    _build_plugin_manager.cache_clear()


def load_publish_formats(config: BloggerConfig) -> dict[str, PublishFormat]:
    """Collect publish formats from all registered plugins, keyed by id."""

    manager = get_plugin_manager()

    formats: dict[str, PublishFormat] = {}
    for contribution in iter_publish_formats(manager, config):
        key = contribution.format_id.lower()
        if key in formats:
            raise PluginRegistrationError(
                f"Duplicate publish format detected: '{contribution.format_id}'."
            )
        formats[key] = contribution

    return formats


def _ensure_iterable(contributions: object) -> Iterable[PublishFormat]:
    """Normalize hook return values to a concrete tuple of contributions."""

    if isinstance(contributions, PublishFormat):
        return (contributions,)

    if not isinstance(contributions, Iterable) or isinstance(
        contributions, (str, bytes)
    ):
        raise PluginRegistrationError(
            "Plugin hook did not return an iterable contribution collection."
        )

    normalized: list[PublishFormat] = []
    for item in contributions:
        if not isinstance(item, PublishFormat):
            raise PluginRegistrationError(
                "Publish contributions must be PublishFormat instances."
            )
        normalized.append(item)
    return tuple(normalized)


__all__ = [
    "PluginRegistrationError",
    "create_plugin_manager",
    "get_plugin_manager",
    "iter_plugin_modules",
    "iter_publish_formats",
    "load_publish_formats",
    "register_modules",
    "reset_plugin_manager_cache",
]
