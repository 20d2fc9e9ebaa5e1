"""Tests for output formatting across JSON, quiet, and Rich modes."""

from __future__ import annotations

import json

from mokareads.output.formatters import OutputSettings, format_result
from mokareads.services.result import ErrorCode, ServiceResult, failure

SEARCH = ServiceResult(
    ok=True,
    op="search",
    data={
        "query": "rust",
        "count": 2,
        "items": [
            {"title": "Intro", "kind": "cheatsheet", "link": "/cheatsheets/rust/Intro",
             "language_or_tag": "rust"},
            {"title": "Intro", "kind": "article", "link": "/articles/Intro",
             "language_or_tag": "rust, systems"},
        ],
    },
)


class TestJsonMode:
    def test_full_result(self) -> None:
        out = format_result(SEARCH, settings=OutputSettings(json_output=True))
        data = json.loads(out)
        assert data["ok"] is True
        assert data["data"]["count"] == 2
        assert data["error"] is None

    def test_failure(self) -> None:
        out = format_result(
            failure("get_article", ErrorCode.NOT_FOUND, "No article", slug="x"),
            settings=OutputSettings(json_output=True),
        )
        data = json.loads(out)
        assert data["error"] == {
            "code": "NOT_FOUND",
            "message": "No article",
            "detail": {"slug": "x"},
        }


class TestQuietMode:
    def test_links_only(self) -> None:
        out = format_result(SEARCH, settings=OutputSettings(quiet=True))
        assert out.splitlines() == ["/cheatsheets/rust/Intro", "/articles/Intro"]

    def test_status_line(self) -> None:
        result = ServiceResult(ok=True, op="stats", data={})
        assert format_result(result, settings=OutputSettings(quiet=True)) == "OK: stats"

    def test_raw_body(self) -> None:
        result = ServiceResult(ok=True, op="fetch_raw", data={"body": "{}"})
        assert format_result(result, settings=OutputSettings(quiet=True)) == "{}"

    def test_error(self) -> None:
        result = failure("search", ErrorCode.FETCH_FAILED, "down")
        out = format_result(result, settings=OutputSettings(quiet=True))
        assert out.startswith("ERROR: search")
        assert "down" in out


class TestRichMode:
    def test_search_table(self) -> None:
        out = format_result(SEARCH)
        assert "Intro" in out
        assert "/articles/Intro" in out
        assert "2 results for 'rust'" in out

    def test_markup_in_titles_is_literal(self) -> None:
        result = ServiceResult(
            ok=True,
            op="search",
            data={"query": "x", "count": 1,
                  "items": [{"title": "[bold]Arrays[/bold]", "kind": "article", "link": "/a"}]},
        )
        assert "[bold]Arrays[/bold]" in format_result(result)

    def test_lang_map_hides_empty_languages(self) -> None:
        result = ServiceResult(
            ok=True,
            op="lang_map",
            data={
                "count": 1,
                "languages": {
                    "rust": [{"title": "Intro", "level_name": "beginner", "author": "M",
                              "link": "/cheatsheets/rust/Intro"}],
                    "zig": [],
                },
            },
        )
        assert "zig" not in format_result(result)
        assert "zig" in format_result(result, settings=OutputSettings(verbose=True))

    def test_record_panel(self) -> None:
        result = ServiceResult(
            ok=True,
            op="get_guide",
            data={"title": "rust book", "repo_name": "rust_book",
                  "link": "https://moka-reads.github.io/rust_book/"},
        )
        out = format_result(result)
        assert "rust book" in out
        assert "repo_name: rust_book" in out

    def test_snapshot_fields(self) -> None:
        result = ServiceResult(
            ok=True, op="build_snapshot", data={"path": "s.json", "articles": 2, "cheatsheets": 3}
        )
        out = format_result(result)
        assert out.startswith("OK")
        assert "articles: 2" in out

    def test_error(self) -> None:
        out = format_result(failure("get_guide", ErrorCode.NOT_FOUND, "No guide", repo="x"),
                            settings=OutputSettings(verbose=True))
        assert "ERROR" in out
        assert "No guide" in out
        assert "repo: x" in out

    def test_verbose_telemetry(self) -> None:
        result = ServiceResult(
            ok=True, op="stats", data={},
            meta={"telemetry": {"name": "CatalogService.stats", "duration_ms": 1.5}},
        )
        out = format_result(result, settings=OutputSettings(verbose=True))
        assert "CatalogService.stats" in out
