"""Helpers for building a programme feed."""

from .errors import ErrorKind, FeedError, PageFetchError
from .models import Enclosure, Episode, Feed, Image

__all__ = [
    "Enclosure",
    "Episode",
    "ErrorKind",
    "Feed",
    "FeedError",
    "Image",
    "PageFetchError",
]
