"""CatalogService — search, language map, lookups, and counts.

All operations are read-only and work on the catalog published when the
call starts; a concurrent refresh does not affect a call in progress.
"""

from __future__ import annotations

from typing import Any

from mokareads.domain.content import Article, Cheatsheet, Guide
from mokareads.domain.types import ContentKind, TopicLanguage
from mokareads.services.base import BaseService
from mokareads.services.result import ErrorCode, ServiceResult, failure
from mokareads.services.telemetry import annotate, traced


def _cheatsheet_item(sheet: Cheatsheet) -> dict[str, Any]:
    return {
        "title": sheet.title,
        "slug": sheet.slug,
        "lang": sheet.lang,
        "level": int(sheet.level),
        "level_name": sheet.level.name.lower(),
        "author": sheet.metadata.author,
        "link": sheet.link_short(),
    }


class CatalogService(BaseService):
    """Read-side operations over the current catalog."""

    # ------------------------------------------------------------------
    # search
    # ------------------------------------------------------------------

    @traced
    def search(self, query: str) -> ServiceResult:
        """Resolve *query* by title, then language, then kind.

        A query that matches nothing, including an empty one, succeeds
        with zero items.
        """
        entries = self._catalog.resolver.search(query)
        annotate("matches", len(entries))
        return ServiceResult(
            ok=True,
            op="search",
            data={
                "query": query,
                "count": len(entries),
                "items": [e.model_dump(mode="json") for e in entries],
            },
        )

    # ------------------------------------------------------------------
    # lang_map: cheat sheets grouped by topic language
    # ------------------------------------------------------------------

    @traced
    def lang_map(self, language: str | None = None) -> ServiceResult:
        """Cheat sheets per topic language, ordered by difficulty.

        With *language*, only that bucket is returned. The name is
        lowercased and parsed like any other language string, so unknown
        names select the ``other`` bucket.
        """
        grouped = self._catalog.lang_map()
        if language is not None:
            lang = TopicLanguage.parse(language.lower())
            grouped = {lang: grouped[lang]}

        languages = {
            lang.value: [_cheatsheet_item(s) for s in sheets] for lang, sheets in grouped.items()
        }
        return ServiceResult(
            ok=True,
            op="lang_map",
            data={
                "languages": languages,
                "count": sum(len(v) for v in languages.values()),
            },
        )

    # ------------------------------------------------------------------
    # get: single-record lookups
    # ------------------------------------------------------------------

    @traced
    def get_article(self, slug: str) -> ServiceResult:
        article = self._catalog.cache.find_article(slug)
        if article is None:
            return failure(
                "get_article", ErrorCode.NOT_FOUND, f"No article with slug {slug!r}", slug=slug
            )
        return ServiceResult(ok=True, op="get_article", data=self._article_data(article))

    @traced
    def get_cheatsheet(self, lang: str, slug: str) -> ServiceResult:
        sheet = self._catalog.cache.find_cheatsheet(lang, slug)
        if sheet is None:
            return failure(
                "get_cheatsheet",
                ErrorCode.NOT_FOUND,
                f"No {lang} cheatsheet with slug {slug!r}",
                lang=lang,
                slug=slug,
            )
        data = {**_cheatsheet_item(sheet), "icon": sheet.metadata.icon, "content": sheet.content}
        return ServiceResult(ok=True, op="get_cheatsheet", data=data)

    @traced
    def get_guide(self, repo_name: str) -> ServiceResult:
        guide = self._catalog.cache.find_guide(repo_name)
        if guide is None:
            return failure(
                "get_guide",
                ErrorCode.NOT_FOUND,
                f"No guide for repository {repo_name!r}",
                repo=repo_name,
            )
        return ServiceResult(ok=True, op="get_guide", data=self._guide_data(guide))

    # ------------------------------------------------------------------
    # stats
    # ------------------------------------------------------------------

    @traced
    def stats(self) -> ServiceResult:
        """Counts per kind and per topic language."""
        catalog = self._catalog
        cache = catalog.cache
        by_language = {
            lang.value: len(entries) for lang, entries in catalog.resolver.by_language.items()
        }
        return ServiceResult(
            ok=True,
            op="stats",
            data={
                "updated_at": cache.updated_at.isoformat(),
                "kinds": {
                    ContentKind.ARTICLE.value: len(cache.articles),
                    ContentKind.CHEATSHEET.value: len(cache.cheatsheets),
                    ContentKind.GUIDE.value: len(cache.guides),
                },
                "languages": by_language,
                "titles": len(catalog.resolver.by_title),
            },
        )

    # ------------------------------------------------------------------
    # helpers
    # ------------------------------------------------------------------

    def _article_data(self, article: Article) -> dict[str, Any]:
        meta = article.metadata
        return {
            "title": meta.title,
            "slug": article.slug,
            "description": meta.description,
            "author": meta.author,
            "date": meta.date,
            "tags": meta.tags,
            "icon": meta.icon,
            "link": article.link(self._settings.library.site_url),
            "content": article.content,
        }

    @staticmethod
    def _guide_data(guide: Guide) -> dict[str, Any]:
        return {
            "repo_name": guide.repo_name,
            "title": guide.unslug,
            "link": guide.redirect_address,
        }
