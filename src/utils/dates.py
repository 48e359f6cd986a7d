"""Date parsing for programme pages.

All timestamps are expressed in a fixed UTC+3 zone. Malformed input never
raises: it degrades to :data:`SENTINEL_DATE`.
"""

from __future__ import annotations

import logging
import re
from datetime import datetime, timedelta, timezone
from typing import Optional, Sequence

log = logging.getLogger(__name__)

MOSCOW = timezone(timedelta(hours=3), "Moscow Time")
SENTINEL_DATE = datetime(1970, 1, 1, 0, 0, 0, tzinfo=MOSCOW)

RUSSIAN_MONTHS = (
    "января",
    "февраля",
    "марта",
    "апреля",
    "мая",
    "июня",
    "июля",
    "августа",
    "сентября",
    "октября",
    "ноября",
    "декабря",
)

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_LOCALIZED_DATE_RE = re.compile(r"(\d{1,2})\s+(\d{1,2})\s+(\d{4}),?\s+(\d{1,2}):(\d{2})")


def parse_date(fragments: Sequence[Optional[str]]) -> datetime:
    """Turn ``(day, month, year, hour, minute)`` fragments into a datetime.

    Fewer than four fragments, a non-numeric fragment or an impossible
    calendar value yields :data:`SENTINEL_DATE`.
    """

    if len(fragments) < 4:
        return SENTINEL_DATE

    values = [0, 0, 0, 0, 0]
    for idx, fragment in enumerate(fragments[:5]):
        if fragment is None or not _INTEGER_RE.fullmatch(fragment):
            return SENTINEL_DATE
        values[idx] = int(fragment)

    day, month, year, hour, minute = values
    try:
        return datetime(year, month, day, hour, minute, tzinfo=MOSCOW)
    except ValueError:
        log.debug("Impossible date %r – using sentinel", fragments)
        return SENTINEL_DATE


def parse_localized_date(text: str) -> datetime:
    """Parse dates like ``24 ноября 2019, 14:10`` (Russian month names)."""

    normalized = (text or "").strip().lower()
    for number, name in enumerate(RUSSIAN_MONTHS, start=1):
        normalized = normalized.replace(name, str(number))
    match = _LOCALIZED_DATE_RE.search(normalized)
    if not match:
        return SENTINEL_DATE
    return parse_date(match.groups())


__all__ = ["MOSCOW", "RUSSIAN_MONTHS", "SENTINEL_DATE", "parse_date", "parse_localized_date"]
