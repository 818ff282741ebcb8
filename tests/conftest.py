"""Shared pytest fixtures and test helpers for mdconv tests."""

from __future__ import annotations

from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from mdconv.config.settings import MdconvSettings
from mdconv.services.telemetry import disable_telemetry

SAMPLE_DOCUMENT = """\
---
title: "Test"
date: "2024-01-01"
tags: ["a","b"]
---
# Hello
"""


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Keep developer MDCONV_* variables out of every test.

    Also switches telemetry back off, since ``-v`` enables it for the
    rest of the thread.
    """
    monkeypatch.delenv("MDCONV_CONFIG", raising=False)
    monkeypatch.delenv("MDCONV_PROJECT_ROOT", raising=False)
    yield
    disable_telemetry()


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Temporary project with ``content/`` and ``public/frontmatter/``.

    This is the single source of truth for the project layout used by
    service and command tests.
    """
    (tmp_path / "content").mkdir()
    (tmp_path / "public" / "frontmatter").mkdir(parents=True)
    return tmp_path


@pytest.fixture
def settings(project_root: Path) -> MdconvSettings:
    """Settings rooted at the temp project with code defaults."""
    return MdconvSettings.from_cli(project_root=project_root)


@pytest.fixture
def _isolated_project(project_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to the temp project so the CLI reads and writes there.

    Use via ``@pytest.mark.usefixtures("_isolated_project")`` on command
    test classes.
    """
    monkeypatch.chdir(project_root)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def write_doc(root: Path, name: str, content: str | bytes) -> Path:
    """Write a document under ``root/content`` and return its path."""
    path = root / "content" / name
    if isinstance(content, bytes):
        path.write_bytes(content)
    else:
        path.write_text(content, encoding="utf-8")
    return path
