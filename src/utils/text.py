#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Text utilities."""

import re
from typing import List, Sequence, Tuple

# Entities that must be rewritten to show up properly in the feed. Order
# matters; no replacement produces text matched by a later entry.
SUBSTITUTES: Tuple[Tuple[str, str], ...] = (
    ("&quot;", '"'),
    ("&ndash;", "–"),
)

_TAG_RE = re.compile(r"<(.+?)?>")
_LINK_TAG_RE = re.compile(r"</?a.*?>")


def clean_text(text: str, substitutes: Sequence[Tuple[str, str]] = SUBSTITUTES) -> str:
    """Replace HTML-encoded symbols with their literal UTF-8 characters."""
    for entity, literal in substitutes:
        text = text.replace(entity, literal)
    return text


def strip_tags(text: str) -> str:
    """Remove every markup tag from ``text``."""
    return _TAG_RE.sub("", text or "")


def strip_link(text: str) -> str:
    """Strip ``<a>`` tags, keeping their content."""
    return _LINK_TAG_RE.sub("", text or "")


def add_text(parts: List[str], text: str) -> List[str]:
    if text:
        parts.append(text)
    return parts


__all__ = ["SUBSTITUTES", "add_text", "clean_text", "strip_link", "strip_tags"]
