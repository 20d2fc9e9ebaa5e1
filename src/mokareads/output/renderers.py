"""Operation-specific Rich renderers for ServiceResult.

Renderers write to a StringIO-backed console and are dispatched on
``result.op``. Unknown ops use the generic key-value renderer.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from mokareads.output.console import create_console, get_output, style_for_kind, style_for_level

if TYPE_CHECKING:
    from rich.console import Console

    from mokareads.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to text (ANSI only on a real terminal)."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Minimal output: links for search hits, otherwise a status line."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    items = result.data.get("items")
    if isinstance(items, list):
        return "\n".join(str(item.get("link", "")) for item in items if isinstance(item, dict))
    if result.op == "fetch_raw":
        return str(result.data.get("body", ""))
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="moka.ok"), Text(f"  {result.op}", style="moka.op"))


def _field(console: Console, key: str, value: Any) -> None:
    k = Text(f"  {key}: ", style="moka.key")
    if key == "title":
        v = Text(str(value), style="moka.title")
    elif key == "link":
        v = Text(str(value), style="moka.link")
    elif isinstance(value, (dict, list)):
        v = Text(json.dumps(value, separators=(",", ":")))
    else:
        v = Text(str(value))
    console.print(k, v, sep="")


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print the meta block, telemetry included (verbose only)."""
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    for key, value in result.meta.items():
        if key == "telemetry" and isinstance(value, dict):
            line = f"    {value.get('duration_ms', 0.0):>8.2f}ms  {value.get('name', '?')}"
            annotations = value.get("annotations") or {}
            if annotations:
                line += "  (" + ", ".join(f"{k}={v}" for k, v in annotations.items()) + ")"
            console.print(line, markup=False)
        else:
            console.print(f"    {key}: {value}", markup=False)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text("ERROR", style="moka.error"),
        Text(f"  {result.op}", style="moka.op"),
        Text(f" — {msg}"),
        sep="",
    )
    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}", markup=False)


# ── Catalog renderers ─────────────────────────────────────────────────


def _render_search(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Search hits as a table: title, kind, link, language or tags."""
    items = result.data.get("items", [])
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Title", style="moka.title")
    table.add_column("Kind")
    table.add_column("Link", style="moka.link", overflow="fold")
    table.add_column("Language / Tags")
    for item in items:
        kind = str(item.get("kind", ""))
        table.add_row(
            Text(str(item.get("title", ""))),
            Text(kind, style=style_for_kind(kind)),
            Text(str(item.get("link", ""))),
            Text(str(item.get("language_or_tag", ""))),
        )
    console.print(table)
    console.print(
        f"\n{result.data.get('count', len(items))} results for {result.data.get('query')!r}",
        markup=False,
    )
    if verbose:
        _render_meta(console, result)


def _render_lang_map(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """One table per language; empty languages are listed only when verbose."""
    languages: dict[str, list[dict[str, Any]]] = result.data.get("languages", {})
    for lang, sheets in languages.items():
        if not sheets and not verbose and len(languages) > 1:
            continue
        table = Table(title=f"{lang} ({len(sheets)})", title_justify="left", pad_edge=False)
        table.add_column("Level")
        table.add_column("Title", style="moka.title")
        table.add_column("Author")
        table.add_column("Link", style="moka.link", overflow="fold")
        for sheet in sheets:
            level_name = str(sheet.get("level_name", ""))
            table.add_row(
                Text(level_name, style=style_for_level(level_name)),
                Text(str(sheet.get("title", ""))),
                Text(str(sheet.get("author", ""))),
                Text(str(sheet.get("link", ""))),
            )
        console.print(table)
    console.print(f"\n{result.data.get('count', 0)} cheatsheets")
    if verbose:
        _render_meta(console, result)


def _render_record(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """A single article, cheat sheet, or guide as a panel."""
    d = result.data
    lines = [
        f"{key}: {d[key]}"
        for key in ("author", "date", "lang", "level_name", "tags", "repo_name", "link")
        if d.get(key)
    ]
    text = Text("\n".join(lines))
    content = str(d.get("content", "")).strip()
    if content:
        text.append("\n\n" + content)
    kind = {"get_article": "article", "get_cheatsheet": "cheatsheet", "get_guide": "guide"}
    border = style_for_kind(kind.get(result.op, "")) or "dim"
    title = Text(str(d.get("title", "Untitled")))
    console.print(Panel(text, title=title, border_style=border, expand=False))
    if verbose:
        _render_meta(console, result)


def _render_stats(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    d = result.data
    _field(console, "updated_at", d.get("updated_at", ""))
    _field(console, "titles", d.get("titles", 0))
    for kind, count in d.get("kinds", {}).items():
        _field(console, kind, count)
    table = Table(show_header=True, pad_edge=False, expand=False)
    table.add_column("Language")
    table.add_column("Entries", justify="right")
    for lang, count in d.get("languages", {}).items():
        table.add_row(lang, str(count))
    console.print(table)
    if verbose:
        _render_meta(console, result)


def _render_snapshot(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """build/fetch/info: path, source, and record counts."""
    _status_line(console, result)
    d = result.data
    for key in (
        "path",
        "exists",
        "source",
        "updated_at",
        "articles",
        "cheatsheets",
        "guides",
        "item_count",
    ):
        if key in d:
            _field(console, key, d[key])
    if verbose:
        _render_meta(console, result)


def _render_raw(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _field(console, "url", result.data.get("url", ""))
    console.print(str(result.data.get("body", "")), markup=False)
    if verbose:
        _render_meta(console, result)


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "search": _render_search,
    "lang_map": _render_lang_map,
    "get_article": _render_record,
    "get_cheatsheet": _render_record,
    "get_guide": _render_record,
    "stats": _render_stats,
    "build_snapshot": _render_snapshot,
    "fetch_snapshot": _render_snapshot,
    "snapshot_info": _render_snapshot,
    "export_rss": _render_snapshot,
    "fetch_raw": _render_raw,
}
