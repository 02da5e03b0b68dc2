"""Config data model for plugin-manifest runs."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from plugin_manifest.types import PluginMetadata


@dataclass(frozen=True)
class ManifestConfig:
    """Resolved generator config."""

    metadata: PluginMetadata = PluginMetadata()
    output: Path | None = None
