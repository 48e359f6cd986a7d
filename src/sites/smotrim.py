"""smotrim.ru (redesigned front-end) – CSS selectors over parsed markup."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import List, Optional
from urllib.parse import urljoin, urlparse

from ..feed.models import Enclosure, Episode, Image
from ..utils.dates import parse_localized_date
from ..utils.ids import episode_id
from .base import SiteVariant, make_soup, select_text
from .patterns import SiteTables

log = logging.getLogger(__name__)


def audio_id_from_path(path: str, prefix: str = "/audio/") -> str:
    """Return the audio ID of a ``/audio/<id>`` link, or ``""``."""
    if not path.startswith(prefix):
        return ""
    return path[len(prefix):].strip("/")


class RedesignSite(SiteVariant):
    name = "smotrim"

    def __init__(self, tables: SiteTables) -> None:
        super().__init__(tables)
        self.selectors = tables.redesign

    def extract_title(self, page: str) -> str:
        return select_text(make_soup(page), self.selectors.programme_title)

    def extract_description(self, page: str) -> str:
        return select_text(make_soup(page), self.selectors.programme_description)

    def extract_image(self, page: str, link: str) -> Optional[Image]:
        img = make_soup(page).select_one(self.selectors.programme_image)
        if img is None or not img.get("src"):
            return None
        return Image(link=link, url=str(img["src"]), title=str(img.get("title") or ""))

    def extract_episodes(self, page: str, link: str) -> List[Episode]:
        soup = make_soup(page)
        episodes: List[Episode] = []
        for card in soup.select(self.selectors.episode_card):
            anchor = card.select_one(self.selectors.episode_link)
            href = str(anchor.get("href") or "") if anchor is not None else ""
            if not href:
                log.warning("smotrim: episode card without link on %s – skipping", link)
                continue
            absolute = urljoin(link, href)

            title = select_text(card, self.selectors.episode_title)
            brand = select_text(card, self.selectors.episode_title_brand)
            if brand and title.startswith(brand):
                title = title[len(brand):]

            path = urlparse(absolute).path
            audio_id = audio_id_from_path(path, self.selectors.episode_audio_prefix)
            episodes.append(
                Episode(
                    id=episode_id(absolute),
                    link=absolute,
                    title=title.strip(),
                    enclosure=Enclosure.for_audio(audio_id) if audio_id else None,
                )
            )
        log.debug("smotrim: %d episode card(s) on %s", len(episodes), link)
        return episodes

    def extract_date(self, page: str) -> datetime:
        """Publication date of an episode detail page."""
        return parse_localized_date(select_text(make_soup(page), self.selectors.detail_date))


__all__ = ["RedesignSite", "audio_id_from_path"]
