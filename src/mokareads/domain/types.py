"""Classification enums: content kind, topic language, difficulty level.

Parsing is total wherever the catalog can meet unknown input. An
unrecognized topic language becomes :attr:`TopicLanguage.OTHER` and an
out-of-range difficulty code is left for the caller to normalize to
:attr:`DifficultyLevel.BEGINNER`. Neither case is reported as an error.
"""

from __future__ import annotations

from enum import IntEnum, StrEnum


class ContentKind(StrEnum):
    """The three content categories in the catalog.

    String order of the values matches declaration order.
    """

    ARTICLE = "article"
    CHEATSHEET = "cheatsheet"
    GUIDE = "guide"

    @classmethod
    def parse(cls, value: str) -> ContentKind | None:
        """Return the kind whose canonical string is *value*, else None.

        Examples:
            >>> ContentKind.parse("guide")
            <ContentKind.GUIDE: 'guide'>
            >>> ContentKind.parse("Guide") is None
            True
        """
        try:
            return cls(value)
        except ValueError:
            return None


class TopicLanguage(StrEnum):
    """Programming languages a cheat sheet or article can be about."""

    KOTLIN = "kotlin"
    RUST = "rust"
    C = "c"
    CPP = "c++"
    ZIG = "zig"
    PYTHON = "python"
    SWIFT = "swift"
    GO = "go"
    OTHER = "other"

    @classmethod
    def parse(cls, value: str) -> TopicLanguage:
        """Parse a lowercase canonical name. Never raises.

        Matching is case-sensitive; anything unrecognized is ``OTHER``.

        Examples:
            >>> TopicLanguage.parse("c++")
            <TopicLanguage.CPP: 'c++'>
            >>> TopicLanguage.parse("Rust")
            <TopicLanguage.OTHER: 'other'>
        """
        try:
            return cls(value)
        except ValueError:
            return cls.OTHER

    @classmethod
    def all_variants(cls) -> list[TopicLanguage]:
        """Every variant exactly once, in declaration order."""
        return list(cls)

    def canonical_name(self) -> str:
        return self.value


class DifficultyLevel(IntEnum):
    """Audience level of a cheat sheet, backed by its numeric code."""

    BEGINNER = 1
    INTERMEDIATE = 2
    ADVANCED = 3

    @classmethod
    def from_code(cls, code: int) -> DifficultyLevel | None:
        """Return the level for *code*, or None outside ``{1, 2, 3}``."""
        try:
            return cls(code)
        except ValueError:
            return None

    @classmethod
    def normalize(cls, code: int) -> DifficultyLevel:
        """Return the level for *code*, substituting ``BEGINNER`` when unknown."""
        level = cls.from_code(code)
        return cls.BEGINNER if level is None else level
