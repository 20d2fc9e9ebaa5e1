"""Content directory discovery and loading.

Layout under a content root::

    articles/{slug}.md
    cheatsheets/{lang}/{slug}.md    (any depth below cheatsheets/)

Guides are not files: they are named by repository in
``[library].guides`` and built with :meth:`Guide.from_repo_name`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import TypeVar

from mokareads.domain.cache import ResourceCache
from mokareads.domain.content import Article, Cheatsheet, Guide
from mokareads.domain.frontmatter import (
    MalformedInputError,
    parse_article,
    parse_cheatsheet,
)
from mokareads.domain.types import ContentKind

logger = logging.getLogger(__name__)

# Map content kind to content-root-relative directory.
CONTENT_PATHS: dict[ContentKind, str] = {
    ContentKind.ARTICLE: "articles",
    ContentKind.CHEATSHEET: "cheatsheets",
}

_R = TypeVar("_R")


def find_content_files(content_root: Path, kind: ContentKind) -> list[Path]:
    """Discover markdown files for *kind*, sorted by path.

    Articles are read from the top level of ``articles/`` only; cheat
    sheets from anywhere below ``cheatsheets/``.
    """
    base_dir = CONTENT_PATHS.get(kind)
    if base_dir is None:
        msg = f"Kind {kind.value!r} has no content directory"
        raise ValueError(msg)

    root = content_root / base_dir
    if not root.is_dir():
        return []
    pattern = root.rglob("*.md") if kind is ContentKind.CHEATSHEET else root.glob("*.md")
    return sorted(p for p in pattern if p.is_file())


def _read_all(paths: Iterable[Path], parser: Callable[[str], _R]) -> list[_R]:
    records: list[_R] = []
    for path in paths:
        try:
            records.append(parser(path.read_text(encoding="utf-8")))
        except MalformedInputError as exc:
            msg = f"{path}: {exc}"
            raise MalformedInputError(msg) from exc
    return records


def read_articles(content_root: Path) -> list[Article]:
    return _read_all(find_content_files(content_root, ContentKind.ARTICLE), parse_article)


def read_cheatsheets(content_root: Path) -> list[Cheatsheet]:
    return _read_all(find_content_files(content_root, ContentKind.CHEATSHEET), parse_cheatsheet)


def load_cache(content_root: Path, guides: Iterable[str] = ()) -> ResourceCache:
    """Parse every document under *content_root* into a fresh cache.

    Raises:
        MalformedInputError: On the first document that fails to parse,
            with its path prepended to the message.
    """
    articles = read_articles(content_root)
    cheatsheets = read_cheatsheets(content_root)
    guide_records = [Guide.from_repo_name(name) for name in guides]
    logger.debug(
        "Loaded %d articles, %d cheatsheets, %d guides from %s",
        len(articles),
        len(cheatsheets),
        len(guide_records),
        content_root,
    )
    return ResourceCache.create(articles, cheatsheets, guide_records)


def read_snapshot(path: Path) -> ResourceCache:
    """Load a snapshot file; a missing file reads as an empty cache."""
    if not path.is_file():
        logger.debug("No snapshot at %s", path)
        return ResourceCache()
    return ResourceCache.from_json(path.read_bytes())


def write_snapshot(path: Path, cache: ResourceCache) -> None:
    """Write *cache* as indented JSON, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(cache.to_json(indent=2), encoding="utf-8")
