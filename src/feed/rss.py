"""RSS 2.0 serialization of an assembled :class:`~src.feed.models.Feed`."""

from __future__ import annotations

import html
import logging
import re
from datetime import datetime, timezone
from email.utils import format_datetime
from typing import List, Optional

from .models import Episode, Feed

log = logging.getLogger(__name__)

RFC = "%a, %d %b %Y %H:%M:%S %z"

# Control characters not allowed in XML (except \t, \n, \r)
_CONTROL_RE = re.compile(r"[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]")


def _sanitize_text(s: str) -> str:
    return _CONTROL_RE.sub("", s or "")


def _cdata(s: str) -> str:
    # split CDATA if the text itself contains ']]>'
    s = _sanitize_text(s).replace("]]>", "]]]]><![CDATA[>")
    return f"<![CDATA[{s}]]>"


def _escape(s: str) -> str:
    return html.escape(_sanitize_text(s))


def _fmt_rfc2822(dt: datetime) -> str:
    aware = dt if dt.tzinfo else dt.replace(tzinfo=timezone.utc)
    try:
        return format_datetime(aware)
    except (TypeError, ValueError):
        log.exception("Could not format %r via format_datetime – using strftime", dt)
        return aware.strftime(RFC)


def _emit_channel_header(feed: Feed) -> List[str]:
    h = []
    h.append('<?xml version="1.0" encoding="UTF-8"?>')
    h.append('<rss version="2.0">')
    h.append("<channel>")
    h.append(f"<title>{_escape(feed.title)}</title>")
    h.append(f"<link>{_escape(feed.link)}</link>")
    h.append(f"<description>{_escape(feed.description)}</description>")
    if feed.created is not None:
        h.append(f"<pubDate>{_fmt_rfc2822(feed.created)}</pubDate>")
        h.append(f"<lastBuildDate>{_fmt_rfc2822(feed.created)}</lastBuildDate>")
    if feed.image is not None:
        h.append("<image>")
        h.append(f"<url>{_escape(feed.image.url)}</url>")
        h.append(f"<title>{_escape(feed.image.title)}</title>")
        h.append(f"<link>{_escape(feed.image.link)}</link>")
        h.append("</image>")
    return h


def _emit_item(item: Episode) -> str:
    parts: List[str] = []
    parts.append("<item>")
    parts.append(f"<title>{_escape(item.title)}</title>")
    parts.append(f"<link>{_escape(item.link)}</link>")
    parts.append(f"<description>{_cdata(item.description)}</description>")
    if item.enclosure is not None and item.enclosure.url:
        enc = item.enclosure
        parts.append(
            f'<enclosure url="{_escape(enc.url)}" length="{_escape(enc.length)}" '
            f'type="{_escape(enc.type)}"/>'
        )
    parts.append(f'<guid isPermaLink="false">{_escape(item.id)}</guid>')
    created: Optional[datetime] = item.created
    if created is not None:
        parts.append(f"<pubDate>{_fmt_rfc2822(created)}</pubDate>")
    parts.append("</item>")
    return "\n".join(parts)


def to_rss(feed: Feed) -> str:
    """Render ``feed`` as an RSS 2.0 document, items in feed order."""

    out: List[str] = _emit_channel_header(feed)
    out.extend(_emit_item(item) for item in feed.items)
    out.append("</channel>")
    out.append("</rss>")
    return "\n".join(out)


__all__ = ["RFC", "to_rss"]
