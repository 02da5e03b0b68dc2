"""End-to-end manifest generation.

``generate_manifest`` is the primary entry point; ``build_manifest`` performs
discovery only and never writes.
"""

from __future__ import annotations

import logging
from pathlib import Path

from plugin_manifest.config import load_config
from plugin_manifest.constants.discovery import COMMANDS_DIRNAME, SKILLS_DIRNAME
from plugin_manifest.constants.manifest import (
    MANIFEST_TEMP_PREFIX,
    MANIFEST_TEMP_SUFFIX,
    OUTPUT_DIRNAME,
    OUTPUT_FILENAME,
)
from plugin_manifest.exceptions import ConfigError
from plugin_manifest.io import write_json_atomic
from plugin_manifest.model import GenerationResult, Manifest
from plugin_manifest.scanner.commands import discover_commands
from plugin_manifest.scanner.skills import discover_skills
from plugin_manifest.types import PluginMetadata

logger = logging.getLogger(__name__)


def build_manifest(root: Path, metadata: PluginMetadata | None = None) -> Manifest:
    """Discover commands and skills under *root* and merge them with static metadata."""
    commands = discover_commands(root / COMMANDS_DIRNAME)
    skills = discover_skills(root / SKILLS_DIRNAME, root)
    return Manifest(
        metadata=metadata if metadata is not None else PluginMetadata(),
        commands=commands,
        skills=skills,
    )


def resolve_output_path(root: Path, output: Path | None) -> Path:
    """Return the manifest destination, relative paths anchored at *root*."""
    if output is None:
        return root / OUTPUT_DIRNAME / OUTPUT_FILENAME
    if output.is_absolute():
        return output
    return root / output


def generate_manifest(
    *,
    root: Path,
    config_path: Path | None = None,
    output: Path | None = None,
    dry_run: bool = False,
) -> GenerationResult:
    """Build the manifest for the plugin at *root* and write it unless *dry_run*.

    Filesystem errors from discovery propagate unchanged. Discovery completes
    before anything is written, and the write itself is atomic.
    """
    root = root.resolve()
    if not root.is_dir():
        raise ConfigError(f"Plugin root does not exist or is not a directory: {root}")

    config = load_config(root, config_path)
    manifest = build_manifest(root, config.metadata)
    output_path = resolve_output_path(root, output if output is not None else config.output)

    logger.debug(
        "Collected %d commands and %d skills under %s",
        len(manifest.commands),
        len(manifest.skills),
        root,
    )

    if dry_run:
        return GenerationResult(manifest=manifest, output_path=output_path, written=False)

    write_json_atomic(
        path=output_path,
        payload=manifest.to_dict(),
        temp_prefix=MANIFEST_TEMP_PREFIX,
        temp_suffix=MANIFEST_TEMP_SUFFIX,
    )
    logger.debug("Wrote %s", output_path)
    return GenerationResult(manifest=manifest, output_path=output_path)
