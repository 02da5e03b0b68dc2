"""Configuration-related exceptions."""

from __future__ import annotations

from plugin_manifest.exceptions.base import PluginManifestError


class ConfigError(PluginManifestError, ValueError):
    """Raised when generator configuration is invalid."""
