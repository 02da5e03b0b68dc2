"""Core data models for plugin-manifest."""

from .entities import CommandEntry, DescriptorMetadata, GenerationResult, Manifest, SkillEntry

__all__ = [
    "CommandEntry",
    "DescriptorMetadata",
    "GenerationResult",
    "Manifest",
    "SkillEntry",
]
