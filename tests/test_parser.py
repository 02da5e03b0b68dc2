"""Tests for metadata-block extraction and one-line field matching."""

from pathlib import Path

import pytest

from plugin_manifest.model import DescriptorMetadata
from plugin_manifest.parsers import extract_field, extract_frontmatter_block, parse_descriptor_file


def test_extract_block_returns_inner_lines() -> None:
    text = "---\nname: sample\ndescription: Does things\n---\n# Body\n"

    assert extract_frontmatter_block(text) == "name: sample\ndescription: Does things"


def test_extract_block_requires_leading_delimiter() -> None:
    text = "# Title\n---\ndescription: not metadata\n---\n"

    assert extract_frontmatter_block(text) is None


def test_extract_block_unterminated_is_absent() -> None:
    assert extract_frontmatter_block("---\ndescription: never closed\n# Body\n") is None


def test_extract_block_ignores_bom_and_trailing_spaces() -> None:
    text = "\ufeff---  \ndescription: With BOM\n---\t\n"

    assert extract_frontmatter_block(text) == "description: With BOM"


def test_extract_block_empty_file() -> None:
    assert extract_frontmatter_block("") is None


def test_extract_block_handles_crlf() -> None:
    assert extract_frontmatter_block("---\r\ndescription: Windows\r\n---\r\nBody\r\n") == "description: Windows"


@pytest.mark.parametrize("opening", ["  ---", "---\n  ---"])
def test_extract_block_rejects_indented_delimiters(opening: str) -> None:
    text = f"{opening}\ndescription: Indented\n  ---\n# Body\n"

    assert extract_frontmatter_block(text) is None


def test_extract_block_closes_only_on_unindented_delimiter() -> None:
    text = "---\ndescription: Outer\n  ---\nname: inside\n---\n"

    assert extract_frontmatter_block(text) == "description: Outer\n  ---\nname: inside"


@pytest.mark.parametrize(
    ("block", "expected"),
    [
        ("description: Deploys the app", "Deploys the app"),
        ("description:    padded value   ", "padded value"),
        ("other: x\ndescription: second line\ndescription: ignored", "second line"),
        ("description: keeps: colons inside", "keeps: colons inside"),
        ("description: Page\x0cBreak", "Page\x0cBreak"),
        ("description: Vertical\x0btab\x85next\x1csep", "Vertical\x0btab\x85next\x1csep"),
        ("description: Windows line\r\nname: x", "Windows line"),
        ("description:", None),
        ("description:   \nname: x", None),
        ("  description: indented", None),
        ("name: only", None),
    ],
)
def test_extract_description_field(block: str, expected: str | None) -> None:
    assert extract_field(block, "description") == expected


def test_extract_name_does_not_match_other_keys_ending_in_name() -> None:
    block = "displayName: Pretty\nname: real-name"

    assert extract_field(block, "name") == "real-name"


def test_extract_field_does_not_span_lines() -> None:
    assert extract_field("description:\n  continued value", "description") is None


def test_parse_descriptor_file_reads_name_and_description(tmp_path: Path) -> None:
    descriptor = tmp_path / "SKILL.md"
    descriptor.write_text("---\nname: unit-test\ndescription: Runs unit tests\n---\n# Unit\n", encoding="utf-8")

    assert parse_descriptor_file(descriptor) == DescriptorMetadata(name="unit-test", description="Runs unit tests")


def test_parse_descriptor_file_without_block(tmp_path: Path) -> None:
    descriptor = tmp_path / "notes.md"
    descriptor.write_text("# Notes\nname: not-in-a-block\n", encoding="utf-8")

    assert parse_descriptor_file(descriptor) == DescriptorMetadata()


def test_parse_descriptor_file_missing_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        parse_descriptor_file(tmp_path / "missing.md")


def test_parse_descriptor_file_keeps_form_feed_inside_description(tmp_path: Path) -> None:
    descriptor = tmp_path / "print.md"
    descriptor.write_text("---\ndescription: Page\x0cBreak\n---\n# Print\n", encoding="utf-8")

    assert parse_descriptor_file(descriptor).description == "Page\x0cBreak"
