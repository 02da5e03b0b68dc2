"""Base exception for plugin-manifest."""

from __future__ import annotations


class PluginManifestError(Exception):
    """Base class for errors raised by plugin-manifest."""
