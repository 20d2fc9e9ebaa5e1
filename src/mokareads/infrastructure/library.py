"""Library — the published (cache, resolver) pair.

A :class:`Catalog` is an immutable snapshot plus the resolver built from
it. The :class:`Library` publishes one catalog at a time. Refreshing
builds the next catalog off to the side and swaps it in with a single
attribute assignment, so readers holding the old catalog keep a
consistent view and never need a lock. The lock only serializes writers.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import TYPE_CHECKING

from mokareads.domain.cache import ResourceCache
from mokareads.domain.grouping import group_by_language
from mokareads.domain.search import SearchResolver

if TYPE_CHECKING:
    from mokareads.config.settings import MokaSettings
    from mokareads.domain.content import Cheatsheet
    from mokareads.domain.types import TopicLanguage

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Catalog:
    """One cache and the resolver derived from it."""

    cache: ResourceCache
    resolver: SearchResolver

    @classmethod
    def build(cls, cache: ResourceCache) -> Catalog:
        return cls(cache=cache, resolver=SearchResolver.build(cache))

    def lang_map(self) -> dict[TopicLanguage, list[Cheatsheet]]:
        return group_by_language(self.cache.cheatsheets)


class Library:
    """Holds the current catalog and replaces it wholesale on refresh."""

    def __init__(self, cache: ResourceCache | None = None) -> None:
        self._lock = threading.Lock()
        self._current = Catalog.build(cache or ResourceCache())

    @property
    def current(self) -> Catalog:
        return self._current

    def refresh(self, cache: ResourceCache) -> Catalog:
        """Build a catalog for *cache* and publish it."""
        catalog = Catalog.build(cache)
        with self._lock:
            self._current = catalog
        logger.debug(
            "Published catalog updated_at=%s titles=%d",
            cache.updated_at.isoformat(),
            len(catalog.resolver.by_title),
        )
        return catalog

    @classmethod
    def from_content_dir(cls, settings: MokaSettings) -> Library:
        """Parse the configured content directory."""
        from mokareads.infrastructure.filesystem import load_cache

        return cls(load_cache(settings.content_root, settings.library.guides))

    @classmethod
    def from_snapshot_file(cls, settings: MokaSettings) -> Library:
        """Load the configured snapshot; missing or corrupt reads as empty."""
        from mokareads.infrastructure.filesystem import read_snapshot

        return cls(read_snapshot(settings.snapshot_path))

    @classmethod
    def open(cls, settings: MokaSettings) -> Library:
        """Prefer the snapshot file; fall back to the content directory."""
        if settings.snapshot_path.is_file():
            return cls.from_snapshot_file(settings)
        return cls.from_content_dir(settings)
