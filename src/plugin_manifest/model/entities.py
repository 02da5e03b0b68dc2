"""Dataclasses for descriptor metadata, manifest entries, and run results."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from plugin_manifest.types import JsonObject, PluginMetadata


@dataclass(frozen=True)
class DescriptorMetadata:
    """Fields read from a descriptor's metadata block; ``None`` when absent."""

    name: str | None = None
    description: str | None = None


@dataclass(frozen=True)
class CommandEntry:
    """One invocable command listed in the manifest."""

    description: str
    file: str

    def to_dict(self) -> JsonObject:
        return {"description": self.description, "file": self.file}


@dataclass(frozen=True)
class SkillEntry:
    """One leaf skill directory listed in the manifest."""

    description: str
    path: str

    def to_dict(self) -> JsonObject:
        return {"description": self.description, "path": self.path}


@dataclass(frozen=True)
class Manifest:
    """Aggregated plugin manifest.

    ``commands`` and ``skills`` keep insertion order, which is the order the
    filesystem enumerated their source files.
    """

    metadata: PluginMetadata
    commands: dict[str, CommandEntry] = field(default_factory=dict)
    skills: dict[str, SkillEntry] = field(default_factory=dict)

    def to_dict(self) -> JsonObject:
        payload = self.metadata.to_dict()
        payload["commands"] = {identifier: entry.to_dict() for identifier, entry in self.commands.items()}
        payload["skills"] = {identifier: entry.to_dict() for identifier, entry in self.skills.items()}
        return payload


@dataclass(frozen=True)
class GenerationResult:
    """Outcome of one generator run."""

    manifest: Manifest
    output_path: Path
    written: bool = True

    @property
    def command_count(self) -> int:
        return len(self.manifest.commands)

    @property
    def skill_count(self) -> int:
        return len(self.manifest.skills)
