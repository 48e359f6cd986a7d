"""Structural parse of a programme listing page."""

from __future__ import annotations

import logging

from ..sites import LegacySite, RedesignSite, variant_for
from ..sites.patterns import DEFAULT_TABLES, SiteTables
from .errors import ErrorKind, FeedError
from .models import Feed

log = logging.getLogger(__name__)


def populate_feed(feed: Feed, page: str, tables: SiteTables = DEFAULT_TABLES) -> None:
    """Fill title, description, image and episodes of ``feed`` from ``page``.

    ``feed.link`` must already hold the resolved page URL. An empty
    ``feed.description`` afterwards means the about page has to be fetched.

    Raises:
        FeedError: ``BAD_PROGRAMME_PAGE`` if no title can be found,
            ``BAD_EPISODE`` if an episode block is malformed. The feed's items
            are left untouched in both cases.
    """

    redesign = RedesignSite(tables)
    legacy = LegacySite(tables)

    title = redesign.extract_title(page) or legacy.extract_title(page)
    if not title:
        raise FeedError(ErrorKind.BAD_PROGRAMME_PAGE, "bad programme page: title not found")
    feed.title = title

    feed.description = redesign.extract_description(page)
    feed.image = redesign.extract_image(page, feed.link) or legacy.extract_image(page, feed.link)
    if feed.image is None:
        log.info("No programme image found on %s", feed.link)

    variant = variant_for(feed.link, tables)
    episodes = variant.extract_episodes(page, feed.link)
    for episode in episodes:
        if not feed.add(episode):
            log.warning("Duplicate episode %s on %s – keeping first occurrence", episode.id, feed.link)

    log.info(
        "Parsed programme %r (%s grammar): %d episode(s)",
        feed.title,
        variant.name,
        len(feed.items),
    )


__all__ = ["populate_feed"]
