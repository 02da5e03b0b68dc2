"""Shared exception hierarchy for plugin-manifest."""

from __future__ import annotations

from .base import PluginManifestError
from .config import ConfigError

__all__ = ["ConfigError", "PluginManifestError"]
