"""Shared pytest fixtures and test helpers for mokareads tests."""

from __future__ import annotations

import os
from pathlib import Path

import pytest
from click.testing import CliRunner
from helpers import (
    CPP_SHEET,
    INTRO_ARTICLE,
    KOTLIN_ARTICLE,
    RUST_SHEET,
    ZIG_SHEET,
    make_article,
    make_sheet,
)

from mokareads.config.settings import MokaSettings
from mokareads.domain.cache import ResourceCache
from mokareads.domain.content import Guide
from mokareads.infrastructure.library import Library
from mokareads.services.telemetry import disable_telemetry


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep MOKAREADS_* variables from the outer shell out of every test."""
    for name in list(os.environ):
        if name.startswith("MOKAREADS_"):
            monkeypatch.delenv(name, raising=False)
    yield
    disable_telemetry()


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def intro_cache() -> ResourceCache:
    """One rust cheat sheet and one rust article, both titled "Intro"."""
    return ResourceCache.create(
        articles=[make_article("Intro", tags="rust, systems")],
        cheatsheets=[make_sheet("Intro", "rust", 1)],
    )


@pytest.fixture
def mixed_cache() -> ResourceCache:
    """Several kinds and languages, including an ``other`` cheat sheet."""
    return ResourceCache.create(
        articles=[
            make_article("Intro", tags="rust, systems", description="Getting started"),
            make_article("Coroutines in Practice", tags="kotlin, async", date="2024-02-10"),
        ],
        cheatsheets=[
            make_sheet("Ownership", "rust", 2),
            make_sheet("Intro", "rust", 1),
            make_sheet("Pointers", "c++", 3),
            make_sheet("Haskell Types", "haskell", 1),
        ],
        guides=[Guide.from_repo_name("rust_book")],
    )


@pytest.fixture
def library(mixed_cache: ResourceCache) -> Library:
    return Library(mixed_cache)


@pytest.fixture
def content_root(tmp_path: Path) -> Path:
    """Content directory with two articles and three cheat sheets."""
    root = tmp_path / "content"
    (root / "articles").mkdir(parents=True)
    (root / "cheatsheets" / "rust").mkdir(parents=True)
    (root / "cheatsheets" / "c++").mkdir(parents=True)
    (root / "cheatsheets" / "zig").mkdir(parents=True)
    (root / "articles" / "Intro.md").write_text(INTRO_ARTICLE, encoding="utf-8")
    (root / "articles" / "Coroutines_in_Practice.md").write_text(KOTLIN_ARTICLE, encoding="utf-8")
    (root / "cheatsheets" / "rust" / "Intro.md").write_text(RUST_SHEET, encoding="utf-8")
    (root / "cheatsheets" / "c++" / "Pointers.md").write_text(CPP_SHEET, encoding="utf-8")
    (root / "cheatsheets" / "zig" / "Comptime.md").write_text(ZIG_SHEET, encoding="utf-8")
    return root


@pytest.fixture
def settings(tmp_path: Path, content_root: Path) -> MokaSettings:
    """Settings rooted at *tmp_path* with the sample content directory."""
    return MokaSettings.from_cli(project_root=tmp_path)


@pytest.fixture
def _isolated_project(tmp_path: Path, content_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a project with sample content and one configured guide.

    Use via ``@pytest.mark.usefixtures("_isolated_project")`` on command
    test classes.
    """
    (tmp_path / "mokareads.toml").write_text(
        '[library]\nguides = ["rust_book"]\n', encoding="utf-8"
    )
    monkeypatch.chdir(tmp_path)
