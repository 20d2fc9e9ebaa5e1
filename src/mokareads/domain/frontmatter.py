"""Frontmatter parsing for article and cheat sheet documents.

A content document has three parts::

    ---
    title: My Article
    tags: rust, systems
    ---
    Body in markdown.

The metadata block is YAML, loaded with ruamel.yaml. Any document that
cannot be split into metadata and body, or whose metadata does not fit
the record shape, raises :class:`MalformedInputError`. Nothing here
recovers from that; callers decide whether to skip or abort.

Unknown difficulty codes are not malformed: :func:`parse_cheatsheet`
rewrites them to ``1`` (beginner) before the record is built.
"""

from __future__ import annotations

from io import StringIO
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from mokareads.domain.content import (
    Article,
    ArticleMetadata,
    Cheatsheet,
    CheatsheetMetadata,
)
from mokareads.domain.types import DifficultyLevel

_DELIMITER = "---"

_M = TypeVar("_M", bound=BaseModel)


class MalformedInputError(ValueError):
    """A content document could not be split or its metadata decoded."""


def _new_yaml() -> YAML:
    """Create a fresh round-trip YAML instance.

    ruamel's YAML object keeps emitter state between calls, so every
    load/dump gets its own.
    """
    y = YAML()
    y.preserve_quotes = True
    y.default_flow_style = False
    return y


# ---------------------------------------------------------------------------
# Splitting
# ---------------------------------------------------------------------------


def split_document(text: str) -> tuple[str, str]:
    """Split *text* into ``(metadata_block, body)``.

    The first ``---`` line opens the metadata block and anything above it
    is discarded. The next ``---`` line closes the block. ``\\r\\n`` line
    endings are accepted.

    Raises:
        MalformedInputError: If the document has fewer than two delimiters.
    """
    lines = text.replace("\r\n", "\n").split("\n")
    delimiters = [i for i, line in enumerate(lines) if line.strip() == _DELIMITER][:2]
    if not delimiters:
        msg = "document has no '---' metadata block"
        raise MalformedInputError(msg)
    if len(delimiters) < 2:
        msg = "metadata block is not closed by '---'"
        raise MalformedInputError(msg)

    start, end = delimiters
    block = "\n".join(lines[start + 1 : end])
    body = "\n".join(lines[end + 1 :])
    if body.startswith("\n"):
        body = body[1:]
    return block, body


def parse_metadata(block: str) -> dict[str, Any]:
    """Load a YAML metadata block into a plain dict.

    Raises:
        MalformedInputError: On YAML syntax errors or a non-mapping block.
    """
    try:
        data = _new_yaml().load(block)
    except YAMLError as exc:
        msg = f"invalid YAML metadata: {exc}"
        raise MalformedInputError(msg) from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        msg = f"metadata must be a mapping, got {type(data).__name__}"
        raise MalformedInputError(msg)
    return dict(data)


def _validate(model_cls: type[_M], data: dict[str, Any]) -> _M:
    try:
        return model_cls.model_validate(data)
    except ValidationError as exc:
        fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in exc.errors())
        msg = f"metadata does not match {model_cls.__name__}: {fields}"
        raise MalformedInputError(msg) from exc


# ---------------------------------------------------------------------------
# Typed parsers
# ---------------------------------------------------------------------------


def parse_article(text: str) -> Article:
    """Parse a markdown document into an :class:`Article`."""
    block, body = split_document(text)
    metadata = _validate(ArticleMetadata, parse_metadata(block))
    return Article.new(metadata, body)


def parse_cheatsheet(text: str) -> Cheatsheet:
    """Parse a markdown document into a :class:`Cheatsheet`.

    The level code is normalized so that every parsed cheat sheet
    carries a code in ``{1, 2, 3}``.
    """
    block, body = split_document(text)
    metadata = _validate(CheatsheetMetadata, parse_metadata(block))
    if DifficultyLevel.from_code(metadata.level) is None:
        metadata = metadata.model_copy(update={"level": int(DifficultyLevel.BEGINNER)})
    return Cheatsheet.new(metadata, body)


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


def render_document(metadata: dict[str, Any], body: str) -> str:
    """Render a metadata dict and body back into a three-part document."""
    buf = StringIO()
    _new_yaml().dump(metadata, buf)
    parts = [_DELIMITER, "\n", buf.getvalue(), _DELIMITER, "\n"]
    if body:
        parts.append(body)
    return "".join(parts)


def render_article(article: Article) -> str:
    return render_document(article.metadata.model_dump(), article.content)


def render_cheatsheet(cheatsheet: Cheatsheet) -> str:
    return render_document(cheatsheet.metadata.model_dump(), cheatsheet.content)
