"""Markup grammars of the two site front-ends.

The tables are compiled once at import time and never modified afterwards;
they are passed by reference into every parser and description task.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field


@dataclass(frozen=True)
class LegacyPatterns:
    """Regular expressions over raw radiorus.ru markup."""

    programme_name: re.Pattern[str] = re.compile(r"<h2>(.+?)?</h2>")
    programme_about: re.Pattern[str] = re.compile(
        r'<div class="brand__content_text__anons">(.+?)?</div>', re.DOTALL
    )
    programme_image: re.Pattern[str] = re.compile(
        r'<div class="brand\-promo__header">(.+?)?<img src="(.+?)?"(.+?)?alt=\'(.+?)?\'>',
        re.DOTALL,
    )
    episode_block: re.Pattern[str] = re.compile(
        r'<div class="brand__list\-\-wrap\-\-item">(.+?)?data-id="(.+?)"></div>',
        re.DOTALL,
    )
    episode_title: re.Pattern[str] = re.compile(r'title brand\-menu\-link">(.+?)?</a>')
    episode_url: re.Pattern[str] = re.compile(r'<a href="/brand/(.+?)?" class="title')
    episode_date: re.Pattern[str] = re.compile(
        r'brand\-time brand\-menu\-link">(.+?)?\.(.+?)?\.(.+?)? в (.+?)?:(.+?)?</a>'
    )
    episode_audio: re.Pattern[str] = re.compile(r'data\-type="audio"\s+data\-id="(.+?)?">')


@dataclass(frozen=True)
class RedesignSelectors:
    """CSS selectors for smotrim.ru markup."""

    programme_title: str = ".brand-main-item__title"
    programme_description: str = ".program-about__text"
    programme_image: str = ".brand-main-item__picture img"
    episode_card: str = ".episode-card"
    episode_link: str = ".episode-card__link"
    episode_title: str = ".episode-card__title"
    episode_title_brand: str = ".episode-card__title__brand"
    episode_audio_prefix: str = "/audio/"
    detail_date: str = ".video__date"


@dataclass(frozen=True)
class DetailSelectors:
    """Selectors for the long-form description on episode detail pages."""

    headline: str = ".brand-episode__head .anons"
    body: str = ".brand-episode__body .body"
    video_body: str = ".video__body"


@dataclass(frozen=True)
class SiteTables:
    legacy: LegacyPatterns = field(default_factory=LegacyPatterns)
    redesign: RedesignSelectors = field(default_factory=RedesignSelectors)
    detail: DetailSelectors = field(default_factory=DetailSelectors)


DEFAULT_TABLES = SiteTables()

__all__ = [
    "DEFAULT_TABLES",
    "DetailSelectors",
    "LegacyPatterns",
    "RedesignSelectors",
    "SiteTables",
]
