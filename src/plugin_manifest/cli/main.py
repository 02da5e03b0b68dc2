"""CLI entrypoint for the plugin manifest generator."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from plugin_manifest import __version__
from plugin_manifest.constants.branding import BRAND_NAME, CLI_DESCRIPTION
from plugin_manifest.exceptions import ConfigError, PluginManifestError
from plugin_manifest.io.json_io import dumps_json
from plugin_manifest.reporting import render_summary
from plugin_manifest.scanner import generate_manifest


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(prog=BRAND_NAME, description=CLI_DESCRIPTION)
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-r",
        "--root",
        type=Path,
        default=Path("."),
        help="Plugin root containing commands/ and skills/ (default: current directory)",
    )
    parser.add_argument("-c", "--config", type=Path, default=None, help="Explicit config file")
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Manifest path, relative to the root unless absolute (default: .claude/plugin.json)",
    )
    parser.add_argument(
        "-n",
        "--dry-run",
        action="store_true",
        help="Print the manifest to stdout instead of writing it",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log each discovered command and skill")
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(message)s",
    )

    try:
        result = generate_manifest(
            root=args.root,
            config_path=args.config,
            output=args.output,
            dry_run=args.dry_run,
        )
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    except PluginManifestError as exc:
        print(f"Generator error: {exc}", file=sys.stderr)
        return 1

    if args.dry_run:
        sys.stdout.write(dumps_json(result.manifest.to_dict()))
        print(render_summary(result), file=sys.stderr)
    else:
        print(render_summary(result))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
