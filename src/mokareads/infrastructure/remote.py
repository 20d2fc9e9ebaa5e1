"""Remote snapshot source — the MoKa Reads JSON API.

The ``resources`` endpoint serves the whole snapshot in the same shape
as :meth:`ResourceCache.to_json`. Transport and HTTP-status failures
raise :class:`RemoteFetchError`; a body that is not a valid snapshot
decodes to an empty cache like any other snapshot.
"""

from __future__ import annotations

import logging
from enum import StrEnum

import httpx

from mokareads.domain.cache import ResourceCache

logger = logging.getLogger(__name__)

DEFAULT_API_BASE = "https://mokareads.org/api/"
MAX_REDIRECTS = 3


class RemoteFetchError(RuntimeError):
    """The API could not be reached or answered with an error status."""


class Endpoint(StrEnum):
    """API endpoints, relative to the API base."""

    RESOURCES = "resources"
    CHEATSHEETS = "cheatsheets"
    ARTICLES = "articles"
    GUIDES = "guides"
    LANG_MAP = "lang_map"

    def url(self, base: str = DEFAULT_API_BASE) -> str:
        return f"{base.rstrip('/')}/{self.value}"


def http_client(
    *,
    timeout: float = 10.0,
    user_agent: str = "mokareads",
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Configured client: user agent, bounded timeout, limited redirects."""
    return httpx.Client(
        headers={"User-Agent": user_agent},
        follow_redirects=True,
        timeout=httpx.Timeout(timeout),
        max_redirects=MAX_REDIRECTS,
        transport=transport,
    )


def fetch_text(client: httpx.Client, endpoint: Endpoint, base: str = DEFAULT_API_BASE) -> str:
    """GET one endpoint and return the body text.

    Raises:
        RemoteFetchError: On any transport error or a 4xx/5xx status.
    """
    url = endpoint.url(base)
    logger.debug("Fetching %s", url)
    try:
        response = client.get(url)
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        msg = f"HTTP {exc.response.status_code} for {url}"
        raise RemoteFetchError(msg) from exc
    except httpx.HTTPError as exc:
        msg = f"Request to {url} failed: {exc}"
        raise RemoteFetchError(msg) from exc
    return response.text


def fetch_cache(client: httpx.Client, base: str = DEFAULT_API_BASE) -> ResourceCache:
    """Fetch and decode the full snapshot."""
    cache = ResourceCache.from_json(fetch_text(client, Endpoint.RESOURCES, base))
    if cache.is_empty():
        logger.warning("Remote snapshot from %s decoded to an empty cache", base)
    return cache
