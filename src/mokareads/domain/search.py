"""SearchResolver — three independent lookup indices over one cache.

The resolver answers a single free-text query with the first strategy
that matches, never merging across strategies:

1. exact, case-sensitive title lookup;
2. topic language of the lowercased query, unless it parses to ``other``;
3. content kind of the lowercased query (``article``, ``cheatsheet``, ``guide``);
4. otherwise nothing.

Because step 2 skips ``other``, the query ``"other"`` falls through to the
kind lookup and returns no entries, even though the ``other`` language
bucket may be populated.

Indices are derived views with no identity of their own. The same record
can appear in several of them. A resolver is never updated: build a new
one from the new cache.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from mokareads.domain.cache import ResourceCache
from mokareads.domain.content import SearchEntry
from mokareads.domain.types import ContentKind, TopicLanguage

Index = Mapping[Any, tuple[SearchEntry, ...]]


def distinct_titles(cache: ResourceCache) -> list[str]:
    """Sorted, deduplicated titles across all three kinds."""
    titles = {a.title for a in cache.articles}
    titles.update(c.title for c in cache.cheatsheets)
    titles.update(g.title for g in cache.guides)
    return sorted(titles)


def _language_index(cache: ResourceCache) -> dict[TopicLanguage, tuple[SearchEntry, ...]]:
    index: dict[TopicLanguage, tuple[SearchEntry, ...]] = {}
    for lang in TopicLanguage.all_variants():
        sheets = [c.as_search_entry() for c in cache.cheatsheets if c.language is lang]
        articles = [a.as_search_entry() for a in cache.articles if a.lang_in_tag(lang)]
        index[lang] = (*sheets, *articles)
    return index


def _title_index(cache: ResourceCache) -> dict[str, tuple[SearchEntry, ...]]:
    index: dict[str, tuple[SearchEntry, ...]] = {}
    for title in distinct_titles(cache):
        index[title] = (
            *(c.as_search_entry() for c in cache.cheatsheets if c.title == title),
            *(a.as_search_entry() for a in cache.articles if a.title == title),
            *(g.as_search_entry() for g in cache.guides if g.title == title),
        )
    return index


def _kind_index(cache: ResourceCache) -> dict[ContentKind, tuple[SearchEntry, ...]]:
    return {
        ContentKind.ARTICLE: tuple(a.as_search_entry() for a in cache.articles),
        ContentKind.CHEATSHEET: tuple(c.as_search_entry() for c in cache.cheatsheets),
        ContentKind.GUIDE: tuple(g.as_search_entry() for g in cache.guides),
    }


@dataclass(frozen=True)
class SearchResolver:
    """Read-only title, language, and kind indices built from one cache."""

    by_title: Mapping[str, tuple[SearchEntry, ...]]
    by_language: Mapping[TopicLanguage, tuple[SearchEntry, ...]]
    by_kind: Mapping[ContentKind, tuple[SearchEntry, ...]]

    @classmethod
    def build(cls, cache: ResourceCache) -> SearchResolver:
        """Eagerly build all three indices from *cache*."""
        return cls(
            by_title=MappingProxyType(_title_index(cache)),
            by_language=MappingProxyType(_language_index(cache)),
            by_kind=MappingProxyType(_kind_index(cache)),
        )

    def search(self, query: str) -> list[SearchEntry]:
        """Resolve *query* against the indices. Never raises."""
        entries = self.by_title.get(query)
        if entries is not None:
            return list(entries)

        lowered = query.lower()
        lang = TopicLanguage.parse(lowered)
        if lang is not TopicLanguage.OTHER:
            return list(self.by_language.get(lang, ()))

        kind = ContentKind.parse(lowered)
        if kind is not None:
            return list(self.by_kind.get(kind, ()))

        return []

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready view of all three indices."""

        def dump(index: Index) -> dict[str, list[dict[str, Any]]]:
            return {
                str(key): [e.model_dump(mode="json") for e in entries]
                for key, entries in index.items()
            }

        return {
            "by_title": dump(self.by_title),
            "by_language": dump(self.by_language),
            "by_kind": dump(self.by_kind),
        }
