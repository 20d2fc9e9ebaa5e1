"""Content records (articles, cheat sheets, guides) and their search projection.

Field layout mirrors the snapshot JSON served by the MoKa Reads API:
articles and cheat sheets nest their frontmatter under ``metadata`` next
to ``slug`` and ``content``; guides are flat and keep the short ``addy``
key for their redirect address.

All models are frozen. Topic-language membership differs per kind:

- cheat sheets match on exact equality of their parsed ``lang``;
- articles match when the canonical language name occurs anywhere in
  their free-text ``tags`` string;
- guides never match a language.
"""

from __future__ import annotations

from datetime import UTC, datetime
from datetime import date as _date
from typing import Any

from pydantic import BaseModel, Field, field_validator

from mokareads.domain.types import ContentKind, DifficultyLevel, TopicLanguage

DEFAULT_SITE_URL = "https://moka-reads.mkproj.com"
GUIDE_HOST = "https://moka-reads.github.io"


def slugify(title: str) -> str:
    """Replace spaces with underscores.

    Examples:
        >>> slugify("Intro to Rust")
        'Intro_to_Rust'
    """
    return title.replace(" ", "_")


def _today() -> str:
    return datetime.now(UTC).date().isoformat()


# ---------------------------------------------------------------------------
# Search projection
# ---------------------------------------------------------------------------


class SearchEntry(BaseModel):
    """Lightweight view of one record as returned by search."""

    model_config = {"frozen": True}

    title: str
    kind: ContentKind
    link: str
    language_or_tag: str = ""


# ---------------------------------------------------------------------------
# Articles
# ---------------------------------------------------------------------------


class ArticleMetadata(BaseModel):
    """Frontmatter block of an article."""

    model_config = {"frozen": True}

    title: str
    description: str
    author: str
    icon: str
    date: str = Field(default_factory=_today)
    tags: str

    @field_validator("tags", mode="before")
    @classmethod
    def _join_tag_list(cls, value: Any) -> Any:
        if isinstance(value, (list, tuple)):
            return ", ".join(str(v) for v in value)
        return value

    @field_validator("date", mode="before")
    @classmethod
    def _date_to_str(cls, value: Any) -> Any:
        if isinstance(value, (_date, datetime)):
            return value.isoformat()
        return value


class Article(BaseModel):
    """An article: news, tutorial, or write-up about one or more languages."""

    model_config = {"frozen": True}

    metadata: ArticleMetadata
    slug: str
    content: str

    @classmethod
    def new(cls, metadata: ArticleMetadata, content: str) -> Article:
        return cls(metadata=metadata, slug=slugify(metadata.title), content=content)

    @property
    def title(self) -> str:
        return self.metadata.title

    @property
    def tags(self) -> str:
        return self.metadata.tags

    def link_short(self) -> str:
        return f"/articles/{self.slug}"

    def link(self, site_url: str = DEFAULT_SITE_URL) -> str:
        return f"{site_url.rstrip('/')}{self.link_short()}"

    def lang_in_tag(self, lang: TopicLanguage) -> bool:
        """True when the canonical name of *lang* is a substring of the tags."""
        return lang.canonical_name() in self.metadata.tags

    def as_search_entry(self) -> SearchEntry:
        return SearchEntry(
            title=self.title,
            kind=ContentKind.ARTICLE,
            link=self.link_short(),
            language_or_tag=self.metadata.tags,
        )


# ---------------------------------------------------------------------------
# Cheat sheets
# ---------------------------------------------------------------------------


class CheatsheetMetadata(BaseModel):
    """Frontmatter block of a cheat sheet."""

    model_config = {"frozen": True}

    title: str
    author: str
    level: int
    lang: str
    icon: str


class Cheatsheet(BaseModel):
    """A single-language reference sheet at one difficulty level."""

    model_config = {"frozen": True}

    metadata: CheatsheetMetadata
    slug: str
    content: str

    @classmethod
    def new(cls, metadata: CheatsheetMetadata, content: str) -> Cheatsheet:
        return cls(metadata=metadata, slug=slugify(metadata.title), content=content)

    @property
    def title(self) -> str:
        return self.metadata.title

    @property
    def lang(self) -> str:
        return self.metadata.lang

    @property
    def language(self) -> TopicLanguage:
        return TopicLanguage.parse(self.metadata.lang)

    @property
    def level(self) -> DifficultyLevel:
        """Difficulty level; unknown codes read as ``BEGINNER``."""
        return DifficultyLevel.normalize(self.metadata.level)

    def link_short(self) -> str:
        return f"/cheatsheets/{self.metadata.lang}/{self.slug}"

    def as_search_entry(self) -> SearchEntry:
        return SearchEntry(
            title=self.title,
            kind=ContentKind.CHEATSHEET,
            link=self.link_short(),
            language_or_tag=self.metadata.lang,
        )


# ---------------------------------------------------------------------------
# Guides
# ---------------------------------------------------------------------------


class Guide(BaseModel):
    """A how-to guide hosted as its own GitHub Pages repository."""

    model_config = {"frozen": True, "validate_by_name": True, "validate_by_alias": True}

    repo_name: str
    unslug: str
    redirect_address: str = Field(alias="addy")

    @classmethod
    def from_repo_name(cls, repo_name: str) -> Guide:
        """Build a guide from its repository name.

        Examples:
            >>> Guide.from_repo_name("rust_book").unslug
            'rust book'
        """
        return cls(
            repo_name=repo_name,
            unslug=repo_name.replace("_", " "),
            redirect_address=f"{GUIDE_HOST}/{repo_name}/",
        )

    @property
    def title(self) -> str:
        return self.unslug

    def as_search_entry(self) -> SearchEntry:
        return SearchEntry(
            title=self.unslug,
            kind=ContentKind.GUIDE,
            link=self.redirect_address,
        )
