"""Config loading and normalization from ``plugin-manifest.yaml``."""

from __future__ import annotations

import difflib
from pathlib import Path
from typing import Any

import yaml

from plugin_manifest.config.model import ManifestConfig
from plugin_manifest.constants.config import (
    ALLOWED_AUTHOR_KEYS,
    ALLOWED_CONFIG_KEYS,
    ALLOWED_REPOSITORY_KEYS,
    CONFIG_FILENAME,
    STRING_CONFIG_KEYS,
)
from plugin_manifest.exceptions import ConfigError
from plugin_manifest.types import PluginAuthor, PluginMetadata, PluginRepository


def load_config(root: Path, config_path: Path | None = None) -> ManifestConfig:
    """Load generator config from ``plugin-manifest.yaml`` or an explicit path."""
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return ManifestConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    _reject_unknown_keys(raw, ALLOWED_CONFIG_KEYS, prefix="")

    defaults = PluginMetadata()
    strings = {key: _ensure_string(raw.get(key, _string_default(defaults, key)), key) for key in STRING_CONFIG_KEYS}

    author_raw = _ensure_mapping(raw.get("author"), "author")
    _reject_unknown_keys(author_raw, ALLOWED_AUTHOR_KEYS, prefix="author.")
    repository_raw = _ensure_mapping(raw.get("repository"), "repository")
    _reject_unknown_keys(repository_raw, ALLOWED_REPOSITORY_KEYS, prefix="repository.")

    metadata = PluginMetadata(
        name=strings["name"],
        display_name=strings["displayName"],
        version=strings["version"],
        description=strings["description"],
        author=PluginAuthor(
            name=_ensure_string(author_raw.get("name", defaults.author.name), "author.name"),
            email=_ensure_string(author_raw.get("email", defaults.author.email), "author.email"),
        ),
        homepage=strings["homepage"],
        repository=PluginRepository(
            type=_ensure_string(repository_raw.get("type", defaults.repository.type), "repository.type"),
            url=_ensure_string(repository_raw.get("url", defaults.repository.url), "repository.url"),
        ),
        license=strings["license"],
        keywords=tuple(_ensure_string_list(raw.get("keywords", list(defaults.keywords)), "keywords")),
        main=strings["main"],
    )

    output_raw = raw.get("output")
    output = Path(_ensure_string(output_raw, "output")) if output_raw is not None else None
    return ManifestConfig(metadata=metadata, output=output)


def _string_default(defaults: PluginMetadata, key: str) -> str:
    """Return the default for a top-level string key, mapping ``displayName``."""
    if key == "displayName":
        return defaults.display_name
    return getattr(defaults, key)


def _reject_unknown_keys(raw: dict[str, Any], allowed: frozenset[str], *, prefix: str) -> None:
    for key in raw:
        if key not in allowed:
            message = f"Unknown config key `{prefix}{key}`"
            hint = _suggest_key(str(key), allowed)
            if hint:
                message = f"{message} ({hint})"
            raise ConfigError(message)


def _suggest_key(unknown: str, allowed: frozenset[str]) -> str:
    """Return a 'did you mean ...' hint for a close key match, or empty string."""
    matches = difflib.get_close_matches(unknown, sorted(allowed), n=1, cutoff=0.6)
    if matches:
        return f"did you mean `{matches[0]}`?"
    return ""


def _ensure_string(value: Any, key_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigError(f"{key_name} must be a string")
    return value


def _ensure_mapping(value: Any, key_name: str) -> dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigError(f"{key_name} must be a mapping")
    return value


def _ensure_string_list(value: Any, key_name: str) -> list[str]:
    """Coerce a value to a list of strings, raising ConfigError on type mismatch."""
    if value is None:
        return []
    if not isinstance(value, (list, tuple)) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"{key_name} must be a list of strings")
    return list(value)
