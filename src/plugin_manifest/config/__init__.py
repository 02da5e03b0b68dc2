"""Configuration loading for plugin-manifest runs."""

from __future__ import annotations

from plugin_manifest.config.loader import load_config
from plugin_manifest.config.model import ManifestConfig

__all__ = ["ManifestConfig", "load_config"]
