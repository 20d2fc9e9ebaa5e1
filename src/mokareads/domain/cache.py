"""ResourceCache: one immutable, timestamped snapshot of the catalog.

A cache is built once per refresh, either from parsed content or from a
previously serialized snapshot. Decoding a snapshot never raises: a
document that fails to parse or validate yields an empty cache.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import UTC, datetime

from pydantic import BaseModel, Field, ValidationError

from mokareads.domain.content import Article, Cheatsheet, Guide

logger = logging.getLogger(__name__)


def _now() -> datetime:
    return datetime.now(UTC)


class ResourceCache(BaseModel):
    """All articles, cheat sheets, and guides at one point in time.

    Sequence order is the load order and only matters for display.
    """

    model_config = {"frozen": True}

    updated_at: datetime = Field(default_factory=_now)
    articles: tuple[Article, ...] = ()
    cheatsheets: tuple[Cheatsheet, ...] = ()
    guides: tuple[Guide, ...] = ()

    @classmethod
    def create(
        cls,
        articles: Iterable[Article] = (),
        cheatsheets: Iterable[Cheatsheet] = (),
        guides: Iterable[Guide] = (),
    ) -> ResourceCache:
        """Build a cache stamped with the current UTC time."""
        return cls(
            updated_at=_now(),
            articles=tuple(articles),
            cheatsheets=tuple(cheatsheets),
            guides=tuple(guides),
        )

    @classmethod
    def from_json(cls, data: str | bytes) -> ResourceCache:
        """Decode a serialized snapshot, or return an empty cache on failure."""
        try:
            return cls.model_validate_json(data)
        except ValidationError as exc:
            logger.debug("Snapshot decode failed, using empty cache: %s", exc.error_count())
            return cls()

    def to_json(self, *, indent: int | None = None) -> str:
        return self.model_dump_json(indent=indent, by_alias=True)

    def is_empty(self) -> bool:
        return not (self.articles or self.cheatsheets or self.guides)

    # -- lookups -----------------------------------------------------------

    def find_article(self, slug: str) -> Article | None:
        """First article whose slug is *slug*."""
        return next((a for a in self.articles if a.slug == slug), None)

    def find_cheatsheet(self, lang: str, slug: str) -> Cheatsheet | None:
        """First cheat sheet matching both *slug* and the raw *lang* string."""
        return next(
            (c for c in self.cheatsheets if c.slug == slug and c.lang == lang),
            None,
        )

    def find_guide(self, repo_name: str) -> Guide | None:
        return next((g for g in self.guides if g.repo_name == repo_name), None)
