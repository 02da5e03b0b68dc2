"""One-line console summary for a generator run."""

from __future__ import annotations

from plugin_manifest.constants.branding import DRY_RUN_SUMMARY_TEMPLATE, SUMMARY_TEMPLATE
from plugin_manifest.model import GenerationResult


def render_summary(result: GenerationResult) -> str:
    """Report how many commands and skills went into the manifest."""
    template = SUMMARY_TEMPLATE if result.written else DRY_RUN_SUMMARY_TEMPLATE
    return template.format(
        filename=result.output_path.name,
        commands=result.command_count,
        skills=result.skill_count,
    )
