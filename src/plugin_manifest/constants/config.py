"""Configuration filenames and allowed keys."""

from __future__ import annotations

CONFIG_FILENAME: str = "plugin-manifest.yaml"

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset(
    {
        "name",
        "displayName",
        "version",
        "description",
        "author",
        "homepage",
        "repository",
        "license",
        "keywords",
        "main",
        "output",
    }
)
ALLOWED_AUTHOR_KEYS: frozenset[str] = frozenset({"name", "email"})
ALLOWED_REPOSITORY_KEYS: frozenset[str] = frozenset({"type", "url"})

STRING_CONFIG_KEYS: tuple[str, ...] = (
    "name",
    "displayName",
    "version",
    "description",
    "homepage",
    "license",
    "main",
)
