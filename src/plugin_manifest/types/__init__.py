"""Shared type aliases and typed records for plugin-manifest."""

from .common import JsonObject, JsonScalar, JsonValue
from .metadata import PluginAuthor, PluginMetadata, PluginRepository

__all__ = [
    "JsonObject",
    "JsonScalar",
    "JsonValue",
    "PluginAuthor",
    "PluginMetadata",
    "PluginRepository",
]
