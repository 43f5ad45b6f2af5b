"""mdblogger plugin infrastructure based on pluggy."""

from __future__ import annotations

from ._markers import ENTRY_POINT_GROUP, PLUGIN_NAMESPACE, hookimpl, hookspec
from .manager import (
    PluginRegistrationError,
    create_plugin_manager,
    get_plugin_manager,
    load_publish_formats,
    reset_plugin_manager_cache,
)
from .types import DocumentRenderer, PublishContext, PublishFormat

__all__ = [
    "DocumentRenderer",
    "ENTRY_POINT_GROUP",
    "PLUGIN_NAMESPACE",
    "PluginRegistrationError",
    "PublishContext",
    "PublishFormat",
    "create_plugin_manager",
    "get_plugin_manager",
    "hookimpl",
    "hookspec",
    "load_publish_formats",
    "reset_plugin_manager_cache",
]
