"""Build an RSS feed for one radiorus.ru / smotrim.ru programme."""

from __future__ import annotations

import logging
import time
from datetime import datetime
from pathlib import Path
from time import perf_counter
from typing import Callable, Optional

from .feed.config import FeedSettings, build_settings, listing_url, output_path
from .feed.describe import PageSource, describe_feed
from .feed.errors import ErrorKind, FeedError, PageFetchError
from .feed.logging import configure_logging
from .feed.models import Feed
from .feed.programme import populate_feed
from .feed.rss import to_rss
from .sites.patterns import DEFAULT_TABLES, SiteTables
from .utils.dates import MOSCOW
from .utils.files import atomic_write
from .utils.http import HttpPageSource

log = logging.getLogger("build_feed")


def get_feed(url: str, source: PageSource, tables: SiteTables = DEFAULT_TABLES) -> Feed:
    """Fetch the listing page and run the structural parse.

    Raises:
        PageFetchError: if the listing page cannot be downloaded.
        FeedError: ``BAD_PROGRAMME_PAGE`` or ``BAD_EPISODE``, naming the
            resolved page URL.
    """

    page = source.fetch(url)
    feed = Feed(link=page.url)
    try:
        populate_feed(feed, page.text, tables)
    except FeedError as exc:
        raise exc.with_url(page.url) from exc
    return feed


def process_url(
    url: str,
    source: PageSource,
    tables: SiteTables = DEFAULT_TABLES,
    max_workers: int = 0,
) -> Feed:
    """Structural parse followed by the concurrent description phase."""

    feed = get_feed(url, source, tables)
    describe_feed(feed, source, tables, max_workers=max_workers)
    return feed


def assemble(feed: Feed, now: Optional[datetime] = None) -> Feed:
    feed.created = now or datetime.now(MOSCOW)
    return feed


def build_with_retry(
    url: str,
    source: PageSource,
    settings: FeedSettings,
    tables: SiteTables = DEFAULT_TABLES,
    sleep: Callable[[float], None] = time.sleep,
) -> Feed:
    """Run :func:`process_url`, retrying pages captured in the middle of an update.

    Only ``BAD_EPISODE`` is retried; the last error is re-raised once
    ``settings.bad_episode_retries`` extra attempts are used up.
    """

    attempts = settings.bad_episode_retries + 1
    for attempt in range(1, attempts + 1):
        try:
            return process_url(url, source, tables, max_workers=settings.describe_max_workers)
        except FeedError as exc:
            if exc.kind is not ErrorKind.BAD_EPISODE or attempt >= attempts:
                raise
            log.warning(
                "%s (attempt %d/%d) – page is probably being updated, retrying in %ss",
                exc,
                attempt,
                attempts,
                settings.bad_episode_retry_delay,
            )
            sleep(settings.bad_episode_retry_delay)
    raise AssertionError("unreachable")  # pragma: no cover


def write_feed(feed: Feed, path: Path) -> None:
    with atomic_write(path, encoding="utf-8") as handle:
        handle.write(to_rss(feed))


def main(
    brand: str,
    out_dir: str | Path = "./",
    *,
    smotrim: bool = False,
    settings: Optional[FeedSettings] = None,
    source: Optional[PageSource] = None,
) -> int:
    settings = settings or build_settings()
    configure_logging(settings)

    url = listing_url(brand, redesigned=smotrim)
    source = source or HttpPageSource(
        settings.user_agent, timeout=settings.http_timeout, retries=settings.http_retries
    )
    log.info("Building feed for brand %s from %s", brand, url)

    job_start = perf_counter()
    try:
        feed = assemble(build_with_retry(url, source, settings))
    except (FeedError, PageFetchError) as exc:
        log.error("Feed build failed: %s", exc)
        return 1

    target = output_path(out_dir, brand)
    try:
        write_feed(feed, target)
    except OSError as exc:
        log.error("Could not write %s: %s", target, exc)
        return 1

    log.info(
        "Feed written: %s (%d items) in %.2fs",
        target,
        len(feed.items),
        perf_counter() - job_start,
    )
    return 0


__all__ = [
    "assemble",
    "build_with_retry",
    "get_feed",
    "main",
    "process_url",
    "write_feed",
]
