"""Descriptor parsers."""

from .frontmatter import extract_field, extract_frontmatter_block, parse_descriptor_file

__all__ = ["extract_field", "extract_frontmatter_block", "parse_descriptor_file"]
