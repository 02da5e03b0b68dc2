"""Recursive skill discovery under ``skills/``."""

from __future__ import annotations

import logging
from pathlib import Path

from plugin_manifest.constants.discovery import (
    RELATIVE_PATH_PREFIX,
    SKILL_DESCRIPTION_FALLBACK_TEMPLATE,
    SKILL_MARKDOWN_FILENAME,
)
from plugin_manifest.model import SkillEntry
from plugin_manifest.parsers import parse_descriptor_file

logger = logging.getLogger(__name__)


def discover_skills(skills_dir: Path, root: Path) -> dict[str, SkillEntry]:
    """Collect leaf skills below *skills_dir*, with paths relative to *root*.

    Only subdirectories of *skills_dir* are candidates; a ``SKILL.md`` placed
    directly in *skills_dir* is ignored. A directory holding ``SKILL.md`` is a
    leaf: it yields one entry and its children are not visited. Any other
    directory is searched recursively.
    """
    skills: dict[str, SkillEntry] = {}
    ancestors = frozenset({skills_dir.resolve()})
    for child in skills_dir.iterdir():
        if child.is_dir():
            _walk(child, root, skills, ancestors=ancestors)
    return skills


def is_skill_directory(directory: Path) -> bool:
    """Return True when *directory* directly contains a skill descriptor."""
    return (directory / SKILL_MARKDOWN_FILENAME).is_file()


def _walk(directory: Path, root: Path, skills: dict[str, SkillEntry], *, ancestors: frozenset[Path]) -> None:
    # Loop guard: ancestors on the current path only.
    resolved = directory.resolve()
    if resolved in ancestors:
        logger.debug("Skipping symlink loop at %s", directory)
        return

    if is_skill_directory(directory):
        _add_skill(directory, root, skills)
        return

    nested = ancestors | {resolved}
    for child in directory.iterdir():
        if child.is_dir():
            _walk(child, root, skills, ancestors=nested)


def _add_skill(directory: Path, root: Path, skills: dict[str, SkillEntry]) -> None:
    metadata = parse_descriptor_file(directory / SKILL_MARKDOWN_FILENAME)
    identifier = metadata.name or directory.name
    description = metadata.description or SKILL_DESCRIPTION_FALLBACK_TEMPLATE.format(identifier=directory.name)
    path_ref = f"{RELATIVE_PATH_PREFIX}{_relative_posix(directory, root)}"

    if identifier in skills:
        logger.warning("Skill %s at %s replaces %s", identifier, path_ref, skills[identifier].path)
    skills[identifier] = SkillEntry(description=description, path=path_ref)
    logger.debug("Discovered skill %s (%s)", identifier, path_ref)


def _relative_posix(directory: Path, root: Path) -> str:
    """Render *directory* relative to *root* with forward slashes."""
    try:
        return directory.relative_to(root).as_posix()
    except ValueError:
        return directory.as_posix()
