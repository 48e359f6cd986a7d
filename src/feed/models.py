"""In-memory feed model handed to the RSS serializer."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

AUDIO_DOWNLOAD_URL = "https://audio.vgtrk.com/download?id="
ENCLOSURE_LENGTH = "1024"
ENCLOSURE_TYPE = "audio/mpeg"


@dataclass(frozen=True)
class Image:
    link: str
    url: str
    title: str = ""


@dataclass(frozen=True)
class Enclosure:
    url: str
    length: str = ENCLOSURE_LENGTH
    type: str = ENCLOSURE_TYPE

    @classmethod
    def for_audio(cls, audio_id: str) -> "Enclosure":
        """Build the download enclosure for a broadcaster audio ID."""
        return cls(url=AUDIO_DOWNLOAD_URL + audio_id)


@dataclass
class Episode:
    """One broadcast of a programme.

    ``description`` and (on the redesigned site) ``created`` are filled in by
    the episode's own description task after the structural parse.
    """

    id: str
    link: str
    title: str = ""
    description: str = ""
    enclosure: Optional[Enclosure] = None
    created: Optional[datetime] = None


@dataclass
class Feed:
    title: str = ""
    link: str = ""
    description: str = ""
    image: Optional[Image] = None
    items: List[Episode] = field(default_factory=list)
    created: Optional[datetime] = None

    def add(self, episode: Episode) -> bool:
        """Append ``episode`` unless an item with the same ID is already present."""
        if any(item.id == episode.id for item in self.items):
            return False
        self.items.append(episode)
        return True


__all__ = ["Enclosure", "Episode", "Feed", "Image"]
