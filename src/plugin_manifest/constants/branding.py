"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "plugin-manifest"
CLI_DESCRIPTION: str = (
    "Generate .claude/plugin.json by scanning a plugin's commands/ and skills/ directories."
)
SUMMARY_TEMPLATE: str = "Generated {filename} with {commands} commands and {skills} skills"
DRY_RUN_SUMMARY_TEMPLATE: str = "Would generate {filename} with {commands} commands and {skills} skills"
