"""Typed static plugin metadata written at the top of plugin.json."""

from __future__ import annotations

from dataclasses import dataclass

from plugin_manifest.constants.manifest import (
    DEFAULT_AUTHOR_EMAIL,
    DEFAULT_AUTHOR_NAME,
    DEFAULT_DESCRIPTION,
    DEFAULT_DISPLAY_NAME,
    DEFAULT_HOMEPAGE,
    DEFAULT_KEYWORDS,
    DEFAULT_LICENSE,
    DEFAULT_MAIN,
    DEFAULT_PLUGIN_NAME,
    DEFAULT_REPOSITORY_TYPE,
    DEFAULT_REPOSITORY_URL,
    DEFAULT_VERSION,
)
from plugin_manifest.types.common import JsonObject


@dataclass(frozen=True)
class PluginAuthor:
    """Plugin author contact."""

    name: str = DEFAULT_AUTHOR_NAME
    email: str = DEFAULT_AUTHOR_EMAIL


@dataclass(frozen=True)
class PluginRepository:
    """Source repository reference."""

    type: str = DEFAULT_REPOSITORY_TYPE
    url: str = DEFAULT_REPOSITORY_URL


@dataclass(frozen=True)
class PluginMetadata:
    """Fixed descriptive fields of a plugin manifest."""

    name: str = DEFAULT_PLUGIN_NAME
    display_name: str = DEFAULT_DISPLAY_NAME
    version: str = DEFAULT_VERSION
    description: str = DEFAULT_DESCRIPTION
    author: PluginAuthor = PluginAuthor()
    homepage: str = DEFAULT_HOMEPAGE
    repository: PluginRepository = PluginRepository()
    license: str = DEFAULT_LICENSE
    keywords: tuple[str, ...] = DEFAULT_KEYWORDS
    main: str = DEFAULT_MAIN

    def to_dict(self) -> JsonObject:
        """Serialize in plugin.json key order."""
        return {
            "name": self.name,
            "displayName": self.display_name,
            "version": self.version,
            "description": self.description,
            "author": {"name": self.author.name, "email": self.author.email},
            "homepage": self.homepage,
            "repository": {"type": self.repository.type, "url": self.repository.url},
            "license": self.license,
            "keywords": list(self.keywords),
            "main": self.main,
        }
