"""Constants for command and skill discovery."""

from __future__ import annotations

COMMANDS_DIRNAME: str = "commands"
SKILLS_DIRNAME: str = "skills"
COMMAND_FILE_SUFFIX: str = ".md"
SKILL_MARKDOWN_FILENAME: str = "SKILL.md"

COMMAND_GROUP_SEPARATOR: str = ":"
COMMAND_DESCRIPTION_FALLBACK_TEMPLATE: str = "{identifier} command"
SKILL_DESCRIPTION_FALLBACK_TEMPLATE: str = "{identifier} skill"
RELATIVE_PATH_PREFIX: str = "./"
