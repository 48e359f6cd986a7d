"""Site front-ends and host-based variant detection."""

from __future__ import annotations

from urllib.parse import urlparse

from .base import SiteVariant
from .patterns import DEFAULT_TABLES, SiteTables
from .radiorus import LegacySite
from .smotrim import RedesignSite

REDESIGNED_HOSTS = frozenset({"smotrim.ru", "www.smotrim.ru"})


def parse_site(link: str) -> str:
    """Return the hostname of ``link`` (empty if it cannot be parsed)."""

    try:
        return urlparse(link or "").hostname or ""
    except ValueError:
        return ""


def variant_for(link: str, tables: SiteTables = DEFAULT_TABLES) -> SiteVariant:
    """Select the markup grammar for a resolved programme URL.

    Unknown hosts use the legacy grammar.
    """

    if parse_site(link) in REDESIGNED_HOSTS:
        return RedesignSite(tables)
    return LegacySite(tables)


__all__ = [
    "DEFAULT_TABLES",
    "LegacySite",
    "REDESIGNED_HOSTS",
    "RedesignSite",
    "SiteTables",
    "SiteVariant",
    "parse_site",
    "variant_for",
]
