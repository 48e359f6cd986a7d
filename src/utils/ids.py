#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""ID and URL utilities."""

__all__ = ["episode_id", "episode_url_prefix", "about_url"]


def episode_id(url: str) -> str:
    """Return the stable item ID for an episode URL.

    ``https://`` is rewritten to ``http://`` so IDs survive the site's move
    between protocols.
    """
    if url.startswith("https://"):
        return "http://" + url[len("https://"):]
    return url


def episode_url_prefix(url: str) -> str:
    """Derive the common episode URL prefix from a programme page URL."""
    return url.split("/brand/")[0] + "/brand/"


def about_url(url: str) -> str:
    """Return the programme "about" page for a listing URL."""
    base = url.rstrip("/")
    if base.endswith("episodes"):
        return base[: -len("episodes")] + "about"
    return base + "/about"
