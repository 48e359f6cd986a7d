"""Fixed-arity pattern extraction.

Every field read from raw markup goes through :func:`extract`, so a missing or
partially rendered field always surfaces as the same
:class:`~src.feed.errors.FeedError` with kind ``CANT_PARSE``.
"""

from __future__ import annotations

import re
from typing import Tuple

from ..feed.errors import ErrorKind, FeedError


def _empty(count: int) -> Tuple[str, ...]:
    return tuple("" for _ in range(count))


def extract(buffer: str, pattern: re.Pattern[str], expected_groups: int) -> Tuple[str, ...]:
    """Return the capture groups of the first match of ``pattern`` in ``buffer``.

    Raises:
        FeedError: with kind ``CANT_PARSE`` if nothing matches or the pattern
            does not capture exactly ``expected_groups`` groups. The error's
            ``groups`` attribute holds ``expected_groups`` empty strings.
    """

    match = pattern.search(buffer or "")
    if match is None or pattern.groups != expected_groups:
        raise FeedError(
            ErrorKind.CANT_PARSE,
            "could not parse page",
            groups=_empty(expected_groups),
        )
    return tuple(group or "" for group in match.groups())


def extract_single(buffer: str, pattern: re.Pattern[str]) -> str:
    return extract(buffer, pattern, 1)[0]


def extract_or_empty(
    buffer: str, pattern: re.Pattern[str], expected_groups: int = 1
) -> Tuple[str, ...]:
    """Like :func:`extract` but return empty groups instead of raising."""

    try:
        return extract(buffer, pattern, expected_groups)
    except FeedError as exc:
        return exc.groups


__all__ = ["extract", "extract_or_empty", "extract_single"]
