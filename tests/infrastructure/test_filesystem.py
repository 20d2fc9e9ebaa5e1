"""Tests for content discovery, loading, and snapshot files."""

from __future__ import annotations

from pathlib import Path

import pytest

from mokareads.domain.cache import ResourceCache
from mokareads.domain.frontmatter import MalformedInputError
from mokareads.domain.types import ContentKind, DifficultyLevel, TopicLanguage
from mokareads.infrastructure.filesystem import (
    find_content_files,
    load_cache,
    read_articles,
    read_cheatsheets,
    read_snapshot,
    write_snapshot,
)


class TestFindContentFiles:
    def test_articles_top_level_only(self, content_root: Path) -> None:
        nested = content_root / "articles" / "drafts"
        nested.mkdir()
        (nested / "Draft.md").write_text("---\ntitle: Draft\n---\n", encoding="utf-8")
        names = [p.name for p in find_content_files(content_root, ContentKind.ARTICLE)]
        assert names == ["Coroutines_in_Practice.md", "Intro.md"]

    def test_cheatsheets_recursive(self, content_root: Path) -> None:
        paths = find_content_files(content_root, ContentKind.CHEATSHEET)
        assert len(paths) == 3
        assert paths == sorted(paths)

    def test_non_markdown_ignored(self, content_root: Path) -> None:
        (content_root / "articles" / "notes.txt").write_text("x", encoding="utf-8")
        assert len(find_content_files(content_root, ContentKind.ARTICLE)) == 2

    def test_missing_directory(self, tmp_path: Path) -> None:
        assert find_content_files(tmp_path, ContentKind.ARTICLE) == []

    def test_guides_have_no_directory(self, content_root: Path) -> None:
        with pytest.raises(ValueError, match="guide"):
            find_content_files(content_root, ContentKind.GUIDE)


class TestReaders:
    def test_read_articles(self, content_root: Path) -> None:
        articles = read_articles(content_root)
        intro = next(a for a in articles if a.slug == "Intro")
        assert intro.metadata.date == "2024-01-05"
        assert intro.content == "Rust is a systems language.\n"

    def test_read_cheatsheets(self, content_root: Path) -> None:
        sheets = {s.slug: s for s in read_cheatsheets(content_root)}
        assert sheets["Pointers"].language is TopicLanguage.CPP
        assert sheets["Comptime"].metadata.level == 1
        assert sheets["Comptime"].level is DifficultyLevel.BEGINNER

    def test_malformed_document_names_path(self, content_root: Path) -> None:
        bad = content_root / "articles" / "Broken.md"
        bad.write_text("no frontmatter here", encoding="utf-8")
        with pytest.raises(MalformedInputError, match="Broken.md"):
            read_articles(content_root)

    def test_incomplete_cheatsheet_names_path(self, content_root: Path) -> None:
        stub = content_root / "cheatsheets" / "rust" / "Stub.md"
        stub.write_text("---\ntitle: Stub\n---\nBody", encoding="utf-8")
        with pytest.raises(MalformedInputError, match="Stub.md"):
            read_cheatsheets(content_root)


class TestLoadCache:
    def test_counts(self, content_root: Path) -> None:
        cache = load_cache(content_root, ["rust_book", "zig_guide"])
        assert len(cache.articles) == 2
        assert len(cache.cheatsheets) == 3
        assert [g.unslug for g in cache.guides] == ["rust book", "zig guide"]

    def test_empty_root(self, tmp_path: Path) -> None:
        assert load_cache(tmp_path).is_empty()


class TestSnapshotFiles:
    def test_write_then_read(self, tmp_path: Path, mixed_cache: ResourceCache) -> None:
        target = tmp_path / "nested" / "snapshot.json"
        write_snapshot(target, mixed_cache)
        assert target.is_file()
        assert read_snapshot(target) == mixed_cache

    def test_missing_file_is_empty(self, tmp_path: Path) -> None:
        assert read_snapshot(tmp_path / "missing.json").is_empty()

    def test_corrupt_file_is_empty(self, tmp_path: Path) -> None:
        target = tmp_path / "snapshot.json"
        target.write_text("{ truncated", encoding="utf-8")
        assert read_snapshot(target).is_empty()
