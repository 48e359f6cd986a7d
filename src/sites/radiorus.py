#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
radiorus.ru (legacy front-end) – regular expressions over raw markup.

- Programme page: ``<h2>`` title, promo image, episode list blocks
- Every episode block must carry exactly one episode link; a second link means
  the page was captured in the middle of an update and the whole listing is
  rejected
- Dates like ``24.11.2019 в 14:10`` are read in Moscow time
"""

from __future__ import annotations

import logging
from typing import List, Optional

from ..feed.errors import ErrorKind, FeedError
from ..feed.models import Enclosure, Episode, Image
from ..utils.dates import parse_date
from ..utils.extract import extract, extract_or_empty, extract_single
from ..utils.ids import episode_id, episode_url_prefix
from ..utils.text import strip_link, strip_tags
from .base import SiteVariant
from .patterns import LegacyPatterns, SiteTables

log = logging.getLogger(__name__)


def find_episodes(page: str, patterns: LegacyPatterns) -> List[str]:
    """Split a programme page into candidate episode blocks, in page order."""
    return [m.group(0) for m in patterns.episode_block.finditer(page or "")]


def find_enclosure(block: str, patterns: LegacyPatterns) -> Optional[Enclosure]:
    try:
        audio_id = extract_single(block, patterns.episode_audio)
    except FeedError:
        return None
    if not audio_id:
        return None
    return Enclosure.for_audio(audio_id)


def parse_episode(block: str, url_prefix: str, patterns: LegacyPatterns) -> Episode:
    """Build an :class:`Episode` from one segmented block.

    Raises:
        FeedError: ``BAD_EPISODE`` if the block has no episode link or more
            than one.
    """

    if len(patterns.episode_url.findall(block)) > 1:
        raise FeedError(ErrorKind.BAD_EPISODE, "bad episode: duplicate episode links")
    try:
        path = extract_single(block, patterns.episode_url)
    except FeedError as exc:
        raise FeedError(ErrorKind.BAD_EPISODE, "bad episode: episode link not found") from exc

    link = url_prefix + path
    (title,) = extract_or_empty(block, patterns.episode_title)
    date_fragments = patterns.episode_date.search(block)
    created = parse_date(date_fragments.groups() if date_fragments else ())

    return Episode(
        id=episode_id(link),
        link=link,
        title=title,
        enclosure=find_enclosure(block, patterns),
        created=created,
    )


def parse_programme_title(page: str, patterns: LegacyPatterns) -> str:
    (title,) = extract_or_empty(page, patterns.programme_name)
    return strip_link(title).strip()


def parse_about(page: str, patterns: LegacyPatterns) -> str:
    """Return the programme description from an "about" page.

    Raises:
        FeedError: ``CANT_PARSE`` if the description block is missing.
    """
    return strip_tags(extract_single(page, patterns.programme_about)).strip()


class LegacySite(SiteVariant):
    name = "radiorus"

    def __init__(self, tables: SiteTables) -> None:
        super().__init__(tables)
        self.patterns = tables.legacy

    def extract_title(self, page: str) -> str:
        return parse_programme_title(page, self.patterns)

    def extract_description(self, page: str) -> str:
        # The listing page carries no description; it lives on the about page.
        return ""

    def extract_image(self, page: str, link: str) -> Optional[Image]:
        try:
            _, url, _, title = extract(page, self.patterns.programme_image, 4)
        except FeedError:
            return None
        if not url:
            return None
        return Image(link=link, url=url, title=title)

    def extract_episodes(self, page: str, link: str) -> List[Episode]:
        prefix = episode_url_prefix(link)
        episodes: List[Episode] = []
        for block in find_episodes(page, self.patterns):
            episodes.append(parse_episode(block, prefix, self.patterns))
        log.debug("radiorus: %d episode block(s) on %s", len(episodes), link)
        return episodes


__all__ = [
    "LegacySite",
    "find_enclosure",
    "find_episodes",
    "parse_about",
    "parse_episode",
    "parse_programme_title",
]
