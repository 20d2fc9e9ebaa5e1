"""SnapshotService — build, fetch, and inspect snapshot files.

A successful build or fetch writes the snapshot and publishes it to the
library, so later calls in the same process see the new catalog.
"""

from __future__ import annotations

import logging
from pathlib import Path

import httpx

from mokareads.domain.cache import ResourceCache
from mokareads.domain.frontmatter import MalformedInputError
from mokareads.infrastructure.filesystem import load_cache, read_snapshot, write_snapshot
from mokareads.infrastructure.remote import (
    Endpoint,
    RemoteFetchError,
    fetch_cache,
    fetch_text,
    http_client,
)
from mokareads.services.base import BaseService
from mokareads.services.result import ErrorCode, ServiceResult, failure
from mokareads.services.telemetry import annotate, traced

logger = logging.getLogger(__name__)


def _summary(cache: ResourceCache) -> dict[str, int | str]:
    return {
        "updated_at": cache.updated_at.isoformat(),
        "articles": len(cache.articles),
        "cheatsheets": len(cache.cheatsheets),
        "guides": len(cache.guides),
    }


class SnapshotService(BaseService):
    """Produce and inspect serialized caches."""

    @traced
    def build(
        self,
        *,
        content_dir: Path | None = None,
        output: Path | None = None,
    ) -> ServiceResult:
        """Parse a content directory and write its snapshot."""
        source = content_dir or self._settings.content_root
        target = output or self._settings.snapshot_path
        if not source.is_dir():
            return failure(
                "build_snapshot",
                ErrorCode.NOT_FOUND,
                f"Content directory not found: {source}",
                path=str(source),
            )

        try:
            cache = load_cache(source, self._settings.library.guides)
        except MalformedInputError as exc:
            return failure("build_snapshot", ErrorCode.MALFORMED_INPUT, str(exc))

        return self._publish("build_snapshot", cache, target, source=str(source))

    @traced
    def fetch(
        self,
        *,
        output: Path | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> ServiceResult:
        """Download the full snapshot from the API and write it."""
        remote = self._settings.remote
        target = output or self._settings.snapshot_path
        try:
            with http_client(
                timeout=remote.timeout, user_agent=remote.user_agent, transport=transport
            ) as client:
                cache = fetch_cache(client, remote.api_base)
        except RemoteFetchError as exc:
            return failure(
                "fetch_snapshot", ErrorCode.FETCH_FAILED, str(exc), api_base=remote.api_base
            )

        result = self._publish("fetch_snapshot", cache, target, source=remote.api_base)
        if result.ok and cache.is_empty():
            return result.with_warning("Remote snapshot was empty or invalid")
        return result

    @traced
    def raw(
        self,
        endpoint: Endpoint,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> ServiceResult:
        """Fetch one API endpoint verbatim."""
        remote = self._settings.remote
        try:
            with http_client(
                timeout=remote.timeout, user_agent=remote.user_agent, transport=transport
            ) as client:
                body = fetch_text(client, endpoint, remote.api_base)
        except RemoteFetchError as exc:
            return failure("fetch_raw", ErrorCode.FETCH_FAILED, str(exc), endpoint=endpoint.value)
        return ServiceResult(
            ok=True,
            op="fetch_raw",
            data={"endpoint": endpoint.value, "url": endpoint.url(remote.api_base), "body": body},
        )

    @traced
    def info(self, path: Path | None = None) -> ServiceResult:
        """Describe a snapshot file without publishing it."""
        target = path or self._settings.snapshot_path
        exists = target.is_file()
        cache = read_snapshot(target)
        data: dict[str, object] = {"path": str(target), "exists": exists, **_summary(cache)}
        warnings: list[str] = []
        if exists and cache.is_empty():
            warnings.append(f"Snapshot {target} is empty or could not be decoded")
        return ServiceResult(ok=True, op="snapshot_info", data=data, warnings=warnings)

    def _publish(
        self, op: str, cache: ResourceCache, target: Path, *, source: str
    ) -> ServiceResult:
        try:
            write_snapshot(target, cache)
        except OSError as exc:
            return failure(op, ErrorCode.IO_ERROR, f"Cannot write snapshot {target}: {exc}")
        self._library.refresh(cache)
        annotate("records", len(cache.articles) + len(cache.cheatsheets) + len(cache.guides))
        logger.debug("Wrote snapshot %s from %s", target, source)
        return ServiceResult(
            ok=True,
            op=op,
            data={"path": str(target), "source": source, **_summary(cache)},
        )
