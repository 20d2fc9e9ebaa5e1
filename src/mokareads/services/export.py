"""ExportService — RSS feed of all articles.

The feed is RSS 2.0: one ``<item>`` per article carrying title,
description, absolute link, a permalink ``<guid>``, and ``<pubDate>``.
Article dates are ``YYYY-MM-DD`` strings; they are converted to RFC 2822
when they parse and passed through unchanged when they don't.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from datetime import UTC, datetime
from email.utils import format_datetime
from pathlib import Path

from mokareads.domain.content import Article
from mokareads.services.base import BaseService
from mokareads.services.result import ErrorCode, ServiceResult, failure
from mokareads.services.telemetry import traced


def rfc2822_date(value: str) -> str:
    """Convert an ISO date to RFC 2822, or return *value* unchanged."""
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        return value
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return format_datetime(parsed)


class ExportService(BaseService):
    """Write catalog content in portable formats."""

    def build_feed(self) -> ET.Element:
        """Build the ``<rss>`` element for every article in the catalog."""
        feed = self._settings.feed
        site_url = self._settings.library.site_url

        rss = ET.Element("rss", version="2.0")
        channel = ET.SubElement(rss, "channel")
        ET.SubElement(channel, "title").text = feed.title
        ET.SubElement(channel, "link").text = site_url
        ET.SubElement(channel, "description").text = feed.description
        ET.SubElement(channel, "language").text = feed.language
        ET.SubElement(channel, "ttl").text = str(feed.ttl)
        ET.SubElement(channel, "lastBuildDate").text = format_datetime(datetime.now(UTC))

        for article in self._catalog.cache.articles:
            channel.append(self._item(article, site_url))
        return rss

    @staticmethod
    def _item(article: Article, site_url: str) -> ET.Element:
        link = article.link(site_url)
        item = ET.Element("item")
        ET.SubElement(item, "title").text = article.title
        ET.SubElement(item, "description").text = article.metadata.description
        ET.SubElement(item, "link").text = link
        ET.SubElement(item, "guid", isPermaLink="true").text = link
        ET.SubElement(item, "pubDate").text = rfc2822_date(article.metadata.date)
        return item

    @traced
    def rss(self, output: Path) -> ServiceResult:
        """Write the articles feed to *output*."""
        rss = self.build_feed()
        tree = ET.ElementTree(rss)
        ET.indent(tree)
        try:
            output.parent.mkdir(parents=True, exist_ok=True)
            tree.write(output, encoding="utf-8", xml_declaration=True)
        except OSError as exc:
            return failure("export_rss", ErrorCode.IO_ERROR, f"Cannot write feed {output}: {exc}")

        items = rss.find("channel")
        count = len(items.findall("item")) if items is not None else 0
        return ServiceResult(
            ok=True,
            op="export_rss",
            data={"path": str(output), "item_count": count},
        )
