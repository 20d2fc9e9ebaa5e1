"""Tests for snapshot and export commands."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from mokareads.cli import cli


@pytest.mark.usefixtures("_isolated_project")
class TestSnapshotCommand:
    def test_build_then_info(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(cli, ["--json", "snapshot", "build"])
        assert result.exit_code == 0
        assert json.loads(result.stdout)["data"]["guides"] == 1
        assert (tmp_path / ".mokareads" / "snapshot.json").is_file()

        result = cli_runner.invoke(cli, ["--json", "snapshot", "info"])
        data = json.loads(result.stdout)["data"]
        assert data["exists"] is True
        assert data["articles"] == 2

    def test_snapshot_is_preferred(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        cli_runner.invoke(cli, ["snapshot", "build"])
        (tmp_path / "content" / "articles" / "Intro.md").unlink()
        result = cli_runner.invoke(cli, ["--json", "search", "Intro"])
        assert json.loads(result.stdout)["data"]["count"] == 2

    def test_build_custom_output(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        output = tmp_path / "public" / "resources.json"
        result = cli_runner.invoke(cli, ["snapshot", "build", "--output", str(output)])
        assert result.exit_code == 0
        assert output.is_file()

    def test_build_missing_dir(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["snapshot", "build", "--content-dir", "nowhere"])
        assert result.exit_code == 1
        assert "not found" in result.stderr

    def test_fetch_unreachable(
        self, cli_runner: CliRunner, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("MOKAREADS_REMOTE__API_BASE", "http://127.0.0.1:9/api/")
        monkeypatch.setenv("MOKAREADS_REMOTE__TIMEOUT", "0.5")
        result = cli_runner.invoke(cli, ["--json", "snapshot", "fetch"])
        assert result.exit_code == 1
        assert "FETCH_FAILED" in result.stderr

    def test_raw_rejects_unknown_endpoint(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["snapshot", "raw", "awesome"])
        assert result.exit_code == 2

    def test_examples(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["snapshot", "build", "--examples"])
        assert result.exit_code == 0
        assert "mokareads snapshot build" in result.stdout


@pytest.mark.usefixtures("_isolated_project")
class TestExportCommand:
    def test_rss(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(cli, ["--json", "export", "rss", "feed.xml"])
        assert result.exit_code == 0
        assert json.loads(result.stdout)["data"]["item_count"] == 2
        assert (tmp_path / "feed.xml").read_text(encoding="utf-8").startswith("<?xml")


class TestRootGroup:
    def test_version(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "mokareads" in result.stdout

    def test_help_without_subcommand(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, [])
        assert result.exit_code == 0
        for name in ("search", "langs", "stats", "show", "snapshot", "export"):
            assert name in result.stdout
