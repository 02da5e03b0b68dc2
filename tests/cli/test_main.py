"""Tests for CLI parser and main behavior."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import patch

import pytest

from plugin_manifest.cli.main import build_parser, main
from plugin_manifest.exceptions import PluginManifestError


def test_build_parser_defaults_to_current_directory() -> None:
    args = build_parser().parse_args([])

    assert args.root == Path(".")
    assert args.config is None
    assert args.output is None
    assert args.dry_run is False
    assert args.verbose is False


def test_build_parser_accepts_flags(tmp_path: Path) -> None:
    args = build_parser().parse_args(
        ["--root", str(tmp_path), "--config", "c.yaml", "--output", "out.json", "--dry-run", "-v"]
    )

    assert args.root == tmp_path
    assert args.config == Path("c.yaml")
    assert args.output == Path("out.json")
    assert args.dry_run is True
    assert args.verbose is True


def test_main_generates_and_prints_summary(plugin_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main(["--root", str(plugin_root)])

    assert exit_code == 0
    assert capsys.readouterr().out.strip() == "Generated plugin.json with 3 commands and 3 skills"
    assert (plugin_root / ".claude" / "plugin.json").is_file()


def test_main_without_arguments_uses_cwd(
    plugin_root: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.chdir(plugin_root)

    assert main([]) == 0
    assert (plugin_root / ".claude" / "plugin.json").is_file()
    assert "3 commands and 3 skills" in capsys.readouterr().out


def test_main_dry_run_prints_manifest(plugin_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main(["--root", str(plugin_root), "--dry-run"])

    captured = capsys.readouterr()
    assert exit_code == 0
    assert json.loads(captured.out)["commands"]["deploy"]["description"] == "Deploys the app"
    assert "Would generate plugin.json" in captured.err
    assert not (plugin_root / ".claude").exists()


def test_main_config_error_returns_2(plugin_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (plugin_root / "plugin-manifest.yaml").write_text("nmae: typo\n", encoding="utf-8")

    exit_code = main(["--root", str(plugin_root)])

    assert exit_code == 2
    assert "Configuration error" in capsys.readouterr().err


def test_main_generator_error_returns_1(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    with patch("plugin_manifest.cli.main.generate_manifest", side_effect=PluginManifestError("boom")):
        exit_code = main(["--root", str(tmp_path)])

    assert exit_code == 1
    assert "Generator error: boom" in capsys.readouterr().err


def test_main_propagates_filesystem_errors(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        main(["--root", str(tmp_path)])
