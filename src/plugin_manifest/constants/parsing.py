"""Constants for descriptor metadata-block parsing."""

from __future__ import annotations

FRONTMATTER_DELIMITER: str = "---"
UTF8_BOM: str = "\ufeff"

NAME_FIELD: str = "name"
DESCRIPTION_FIELD: str = "description"
