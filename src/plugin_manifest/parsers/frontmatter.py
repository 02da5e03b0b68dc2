"""Parser for the ``---`` delimited metadata block at the top of descriptor files.

Only single-line ``key: value`` matches are supported. The block is not parsed
as YAML, so multi-line values, quoting, and nested keys are taken verbatim or
ignored.
"""

from __future__ import annotations

from pathlib import Path

from plugin_manifest.constants.parsing import (
    DESCRIPTION_FIELD,
    FRONTMATTER_DELIMITER,
    NAME_FIELD,
    UTF8_BOM,
)
from plugin_manifest.model import DescriptorMetadata


def parse_descriptor_file(path: Path) -> DescriptorMetadata:
    """Read a command or skill descriptor and extract its ``name`` and ``description``."""
    block = extract_frontmatter_block(path.read_text(encoding="utf-8"))
    if block is None:
        return DescriptorMetadata()
    return DescriptorMetadata(
        name=extract_field(block, NAME_FIELD),
        description=extract_field(block, DESCRIPTION_FIELD),
    )


def extract_frontmatter_block(text: str) -> str | None:
    """Return the text between the opening and closing delimiter lines, if any."""
    lines = _split_lines(text.lstrip(UTF8_BOM))
    if not lines or lines[0].rstrip() != FRONTMATTER_DELIMITER:
        return None

    closing = _find_frontmatter_end(lines)
    if closing is None:
        return None
    return "\n".join(lines[1:closing])


def extract_field(block: str, key: str) -> str | None:
    """Return the trimmed remainder of the first line starting with ``key:``.

    An empty remainder is treated as absent.
    """
    prefix = f"{key}:"
    for line in _split_lines(block):
        if not line.startswith(prefix):
            continue
        value = line[len(prefix) :].strip()
        if value:
            return value
        return None
    return None


def _find_frontmatter_end(lines: list[str]) -> int | None:
    for index in range(1, len(lines)):
        if lines[index].rstrip() == FRONTMATTER_DELIMITER:
            return index
    return None


def _split_lines(text: str) -> list[str]:
    """Split on newlines only, dropping a trailing carriage return."""
    return [line.removesuffix("\r") for line in text.split("\n")]
