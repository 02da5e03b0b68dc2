"""Default plugin metadata and output locations for plugin.json."""

from __future__ import annotations

DEFAULT_PLUGIN_NAME: str = "softwayapp-marketplace"
DEFAULT_DISPLAY_NAME: str = "SoftwayApp Development Marketplace"
DEFAULT_VERSION: str = "1.0.0"
DEFAULT_DESCRIPTION: str = (
    "Complete development toolkit with 32+ skills, 4 commands, and 3 agents for enterprise workflows"
)
DEFAULT_AUTHOR_NAME: str = "SoftwayApp"
DEFAULT_AUTHOR_EMAIL: str = "dev@softwayapp.com"
DEFAULT_HOMEPAGE: str = "https://github.com/softwayapp/market-place"
DEFAULT_REPOSITORY_TYPE: str = "git"
DEFAULT_REPOSITORY_URL: str = "https://github.com/softwayapp/market-place"
DEFAULT_LICENSE: str = "MIT"
DEFAULT_KEYWORDS: tuple[str, ...] = ("development", "automation", "skills", "enterprise", "marketplace")
DEFAULT_MAIN: str = "./"

OUTPUT_DIRNAME: str = ".claude"
OUTPUT_FILENAME: str = "plugin.json"
MANIFEST_TEMP_PREFIX: str = ".plugin-"
MANIFEST_TEMP_SUFFIX: str = ".json.tmp"
