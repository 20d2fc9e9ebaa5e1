"""Tests for classification enums: kind, topic language, difficulty level."""

from __future__ import annotations

import pytest

from mokareads.domain.types import ContentKind, DifficultyLevel, TopicLanguage


class TestContentKind:
    @pytest.mark.parametrize("value", ["article", "cheatsheet", "guide"])
    def test_parse_canonical(self, value: str) -> None:
        kind = ContentKind.parse(value)
        assert kind is not None
        assert kind.value == value

    @pytest.mark.parametrize("value", ["Article", "articles", "", "cheat sheet"])
    def test_parse_unknown_is_none(self, value: str) -> None:
        assert ContentKind.parse(value) is None

    def test_ordering_follows_declaration(self) -> None:
        assert sorted(ContentKind) == [
            ContentKind.ARTICLE,
            ContentKind.CHEATSHEET,
            ContentKind.GUIDE,
        ]


class TestTopicLanguage:
    def test_parse_round_trips_every_variant(self) -> None:
        for lang in TopicLanguage.all_variants():
            assert TopicLanguage.parse(lang.canonical_name()) is lang

    def test_cpp_canonical_name(self) -> None:
        assert TopicLanguage.CPP.canonical_name() == "c++"
        assert TopicLanguage.parse("c++") is TopicLanguage.CPP

    @pytest.mark.parametrize("value", ["Rust", "PYTHON", "haskell", "", "cpp"])
    def test_unknown_or_wrong_case_is_other(self, value: str) -> None:
        assert TopicLanguage.parse(value) is TopicLanguage.OTHER

    def test_all_variants_in_declaration_order(self) -> None:
        names = [lang.canonical_name() for lang in TopicLanguage.all_variants()]
        assert names == ["kotlin", "rust", "c", "c++", "zig", "python", "swift", "go", "other"]

    def test_all_variants_unique(self) -> None:
        variants = TopicLanguage.all_variants()
        assert len(variants) == len(set(variants)) == 9


class TestDifficultyLevel:
    @pytest.mark.parametrize(
        ("code", "level"),
        [
            (1, DifficultyLevel.BEGINNER),
            (2, DifficultyLevel.INTERMEDIATE),
            (3, DifficultyLevel.ADVANCED),
        ],
    )
    def test_from_code(self, code: int, level: DifficultyLevel) -> None:
        assert DifficultyLevel.from_code(code) is level

    @pytest.mark.parametrize("code", [0, 4, -1, 255])
    def test_from_code_out_of_range(self, code: int) -> None:
        assert DifficultyLevel.from_code(code) is None

    def test_normalize_substitutes_beginner(self) -> None:
        assert DifficultyLevel.normalize(7) is DifficultyLevel.BEGINNER
        assert DifficultyLevel.normalize(3) is DifficultyLevel.ADVANCED

    def test_levels_are_ordered(self) -> None:
        assert DifficultyLevel.BEGINNER < DifficultyLevel.INTERMEDIATE < DifficultyLevel.ADVANCED
