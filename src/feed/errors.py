"""Error kinds raised while building a programme feed."""

from __future__ import annotations

import enum
from typing import Optional, Tuple


class ErrorKind(enum.Enum):
    """Discriminant for :class:`FeedError`."""

    BAD_PROGRAMME_PAGE = "bad programme page"
    BAD_EPISODE = "bad episode"
    CANT_PARSE = "could not parse page"


class FeedError(Exception):
    """Raised when a page cannot be turned into (part of) a feed.

    Callers branch on :attr:`kind`; ``BAD_PROGRAMME_PAGE`` and ``BAD_EPISODE``
    abort feed construction, ``CANT_PARSE`` only affects a single field.
    """

    def __init__(
        self,
        kind: ErrorKind,
        message: str = "",
        *,
        url: Optional[str] = None,
        groups: Tuple[str, ...] = (),
    ) -> None:
        self.kind = kind
        self.url = url
        self.groups = groups
        super().__init__(message or kind.value)

    def with_url(self, url: str) -> "FeedError":
        """Return a copy of this error naming the page it happened on."""

        err = FeedError(
            self.kind,
            f"could not process {url}: {self}",
            url=url,
            groups=self.groups,
        )
        err.__cause__ = self
        return err


class PageFetchError(Exception):
    """Raised when a page cannot be downloaded (transport error or non-2xx)."""

    def __init__(self, url: str, reason: object) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"could not fetch {url}: {reason}")


__all__ = ["ErrorKind", "FeedError", "PageFetchError"]
