"""Tests for the frontmatter CLI command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from mdconv.cli import cli
from tests.conftest import SAMPLE_DOCUMENT, write_doc


@pytest.mark.usefixtures("_isolated_project")
class TestFrontmatterCommand:
    def test_frontmatter_help(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["frontmatter", "--help"])
        assert result.exit_code == 0
        assert "INPUT_FILE" in result.output
        assert "--content-dir" in result.output

    def test_human_output(self, cli_runner: CliRunner, project_root: Path) -> None:
        write_doc(project_root, "hello.md", SAMPLE_DOCUMENT)

        result = cli_runner.invoke(cli, ["frontmatter", "hello.md", "--content-dir", "content"])

        assert result.exit_code == 0, result.output
        assert "OK  extract_front_matter" in result.output
        assert "title: Test" in result.output
        assert "tags: a, b" in result.output

    def test_json_output(self, cli_runner: CliRunner, project_root: Path) -> None:
        write_doc(project_root, "plain.md", "no header\n")

        result = cli_runner.invoke(cli, ["--json", "frontmatter", "content/plain.md"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["data"]["has_front_matter"] is False
        assert data["data"]["front_matter"]["title"] == ""

    def test_writes_no_files(self, cli_runner: CliRunner, project_root: Path) -> None:
        write_doc(project_root, "hello.md", SAMPLE_DOCUMENT)

        cli_runner.invoke(cli, ["frontmatter", "content/hello.md"])

        assert list((project_root / "public").rglob("*.*")) == []

    def test_missing_input(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["frontmatter", "content/missing.md"])
        assert result.exit_code == 1

    def test_frontmatter_examples(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["frontmatter", "--examples"])
        assert result.exit_code == 0
        assert "mdconv frontmatter" in result.output
