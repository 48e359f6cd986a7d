"""Concurrent enrichment of a parsed feed with long-form descriptions.

One task fetches the programme's about page (only when the listing page had
no description), one task per episode fetches its detail page. All tasks run
in a thread pool and are joined before :func:`describe_feed` returns. A task
only writes to its own feed or episode object and never raises into the pool.
"""

from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor, wait
from dataclasses import dataclass
from typing import List, Protocol

from ..sites.base import make_soup, select_text
from ..sites.patterns import DEFAULT_TABLES, DetailSelectors, SiteTables
from ..sites.radiorus import parse_about
from ..sites.smotrim import RedesignSite
from ..utils.dates import SENTINEL_DATE
from ..utils.http import Page
from ..utils.ids import about_url
from ..utils.text import add_text
from .errors import ErrorKind, FeedError, PageFetchError
from .models import Episode, Feed

log = logging.getLogger(__name__)

DESCRIPTION_SEPARATOR = "\n\n"


class PageSource(Protocol):
    def fetch(self, url: str) -> Page:
        ...


@dataclass(frozen=True)
class DescribeSummary:
    tasks: int
    described: int

    @property
    def failed(self) -> int:
        return self.tasks - self.described


def episode_description(page: str, selectors: DetailSelectors) -> str:
    """Join the non-empty description regions of an episode detail page.

    Raises:
        FeedError: ``CANT_PARSE`` if every region is empty.
    """

    soup = make_soup(page)
    parts: List[str] = []
    add_text(parts, select_text(soup, selectors.headline))
    add_text(parts, select_text(soup, selectors.body))
    add_text(parts, select_text(soup, selectors.video_body))
    if not parts:
        raise FeedError(ErrorKind.CANT_PARSE, "no episode description regions found")
    return DESCRIPTION_SEPARATOR.join(parts)


def describe_programme(feed: Feed, source: PageSource, tables: SiteTables = DEFAULT_TABLES) -> bool:
    url = about_url(feed.link)
    try:
        page = source.fetch(url)
        description = parse_about(page.text, tables.legacy)
    except (PageFetchError, FeedError) as exc:
        log.warning("could not find programme description on page %s: %s", url, exc)
        return False
    if not description:
        log.warning("programme description on page %s is empty", url)
        return False
    feed.description = description
    return True


def describe_episode(item: Episode, source: PageSource, tables: SiteTables = DEFAULT_TABLES) -> bool:
    try:
        page = source.fetch(item.link)
    except PageFetchError as exc:
        log.warning("could not fetch episode page %s: %s", item.link, exc)
        if item.created is None:
            item.created = SENTINEL_DATE
        return False

    described = True
    try:
        item.description = episode_description(page.text, tables.detail)
    except FeedError as exc:
        log.warning("could not find episode description on page %s: %s", item.link, exc)
        described = False

    if item.created is None:
        item.created = RedesignSite(tables).extract_date(page.text)
    return described


def describe_feed(
    feed: Feed,
    source: PageSource,
    tables: SiteTables = DEFAULT_TABLES,
    max_workers: int = 0,
) -> DescribeSummary:
    """Fetch all descriptions of ``feed`` concurrently and wait for every task.

    ``max_workers`` caps the pool size; ``0`` runs every task at once.
    """

    jobs = []
    if not feed.description:
        jobs.append((describe_programme, feed, feed.link))
    for item in feed.items:
        jobs.append((describe_episode, item, item.link))

    if not jobs:
        return DescribeSummary(tasks=0, described=0)

    workers = len(jobs) if max_workers <= 0 else min(len(jobs), max_workers)
    described = 0
    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="describe") as executor:
        futures: dict[Future[bool], str] = {
            executor.submit(task, target, source, tables): url for task, target, url in jobs
        }
        done, _ = wait(futures)
        for future in done:
            try:
                if future.result():
                    described += 1
            except Exception:
                log.exception("description task for %s failed", futures[future])

    summary = DescribeSummary(tasks=len(jobs), described=described)
    log.info(
        "Descriptions fetched: %d of %d task(s) succeeded",
        summary.described,
        summary.tasks,
    )
    return summary


__all__ = [
    "DESCRIPTION_SEPARATOR",
    "DescribeSummary",
    "PageSource",
    "describe_episode",
    "describe_feed",
    "describe_programme",
    "episode_description",
]
