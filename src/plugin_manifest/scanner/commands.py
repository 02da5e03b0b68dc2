"""Command discovery under ``commands/``."""

from __future__ import annotations

import logging
from pathlib import Path

from plugin_manifest.constants.discovery import (
    COMMAND_DESCRIPTION_FALLBACK_TEMPLATE,
    COMMAND_FILE_SUFFIX,
    COMMAND_GROUP_SEPARATOR,
    COMMANDS_DIRNAME,
    RELATIVE_PATH_PREFIX,
)
from plugin_manifest.model import CommandEntry
from plugin_manifest.parsers import parse_descriptor_file

logger = logging.getLogger(__name__)


def discover_commands(commands_dir: Path) -> dict[str, CommandEntry]:
    """Collect command entries from top-level files and one level of group directories.

    Entries are keyed in filesystem enumeration order. A later file that maps
    to an existing identifier replaces the earlier entry.
    """
    commands: dict[str, CommandEntry] = {}

    for child in commands_dir.iterdir():
        if child.is_dir():
            for grouped in child.iterdir():
                if not _is_command_file(grouped):
                    continue
                identifier = f"{child.name}{COMMAND_GROUP_SEPARATOR}{_command_stem(grouped)}"
                file_ref = f"{RELATIVE_PATH_PREFIX}{COMMANDS_DIRNAME}/{child.name}/{grouped.name}"
                _add_command(commands, identifier, grouped, file_ref)
        elif _is_command_file(child):
            file_ref = f"{RELATIVE_PATH_PREFIX}{COMMANDS_DIRNAME}/{child.name}"
            _add_command(commands, _command_stem(child), child, file_ref)

    return commands


def _add_command(commands: dict[str, CommandEntry], identifier: str, path: Path, file_ref: str) -> None:
    metadata = parse_descriptor_file(path)
    description = metadata.description or COMMAND_DESCRIPTION_FALLBACK_TEMPLATE.format(identifier=identifier)
    if identifier in commands:
        logger.warning("Command %s from %s replaces %s", identifier, file_ref, commands[identifier].file)
    commands[identifier] = CommandEntry(description=description, file=file_ref)
    logger.debug("Discovered command %s (%s)", identifier, file_ref)


def _is_command_file(path: Path) -> bool:
    return path.name.endswith(COMMAND_FILE_SUFFIX) and path.is_file()


def _command_stem(path: Path) -> str:
    return path.name[: -len(COMMAND_FILE_SUFFIX)]
