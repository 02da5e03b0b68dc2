"""Allow ``python -m plugin_manifest``."""

from __future__ import annotations

from plugin_manifest.cli.main import main

raise SystemExit(main())
