"""Common interface of the site front-ends."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

from bs4 import BeautifulSoup
from bs4.element import Tag

from ..feed.models import Episode, Image
from .patterns import SiteTables

HTML_PARSER = "lxml"


def make_soup(page: str) -> BeautifulSoup:
    return BeautifulSoup(page or "", HTML_PARSER)


def select_text(soup: Tag, selector: str) -> str:
    """Concatenated text of every element matching ``selector``, stripped."""
    return "".join(el.get_text() for el in soup.select(selector)).strip()


class SiteVariant(ABC):
    """Extraction capabilities for one markup grammar.

    Methods return empty values when their field is missing; only
    :meth:`extract_episodes` may raise (``BAD_EPISODE``).
    """

    name: str = ""

    def __init__(self, tables: SiteTables) -> None:
        self.tables = tables

    @abstractmethod
    def extract_title(self, page: str) -> str:
        ...

    @abstractmethod
    def extract_description(self, page: str) -> str:
        ...

    @abstractmethod
    def extract_image(self, page: str, link: str) -> Optional[Image]:
        ...

    @abstractmethod
    def extract_episodes(self, page: str, link: str) -> List[Episode]:
        ...


__all__ = ["HTML_PARSER", "SiteVariant", "make_soup", "select_text"]
