"""Language grouping for cheat sheets."""

from __future__ import annotations

from collections.abc import Iterable

from mokareads.domain.content import Cheatsheet
from mokareads.domain.types import TopicLanguage


def cheatsheets_for(lang: TopicLanguage, cheatsheets: Iterable[Cheatsheet]) -> list[Cheatsheet]:
    """Cheat sheets whose parsed ``lang`` equals *lang*, in input order."""
    return [c for c in cheatsheets if c.language is lang]


def sort_by_level(cheatsheets: Iterable[Cheatsheet]) -> list[Cheatsheet]:
    """Sort ascending by difficulty level.

    ``sorted`` is stable, so sheets of equal level keep their input order.
    """
    return sorted(cheatsheets, key=lambda c: c.level)


def group_by_language(
    cheatsheets: Iterable[Cheatsheet],
) -> dict[TopicLanguage, list[Cheatsheet]]:
    """Partition cheat sheets by topic language, each bucket sorted by level.

    Every :class:`TopicLanguage` variant is a key, even when its bucket is
    empty. Keys follow declaration order.
    """
    items = list(cheatsheets)
    return {
        lang: sort_by_level(cheatsheets_for(lang, items)) for lang in TopicLanguage.all_variants()
    }
