import sys
import threading
from pathlib import Path
from typing import Dict, List, Mapping, Optional

import pytest

root = Path(__file__).resolve().parents[1]
if str(root) not in sys.path:
    sys.path.insert(0, str(root))

from src.feed.errors import PageFetchError  # noqa: E402
from src.utils.http import Page  # noqa: E402
from src.utils.text import clean_text  # noqa: E402

FIXTURES = Path(__file__).resolve().parent / "fixtures"

LEGACY_LISTING = "https://www.radiorus.ru/brand/57083/episodes"
LEGACY_ABOUT = "https://www.radiorus.ru/brand/57083/about"
LEGACY_EPISODES = [
    "https://www.radiorus.ru/brand/57083/episode/2176502",
    "https://www.radiorus.ru/brand/57083/episode/2176503",
    "https://www.radiorus.ru/brand/57083/episode/2176504",
]
SMOTRIM_LISTING = "https://smotrim.ru/brand/57083"


def load_fixture(name: str) -> str:
    return (FIXTURES / name).read_text(encoding="utf-8")


class FakePageSource:
    """In-memory page source; unknown URLs fail like an unreachable host."""

    def __init__(self, pages: Mapping[str, str], redirects: Optional[Mapping[str, str]] = None) -> None:
        self.pages: Dict[str, str] = dict(pages)
        self.redirects: Dict[str, str] = dict(redirects or {})
        self.requested: List[str] = []
        self._lock = threading.Lock()

    def fetch(self, url: str) -> Page:
        with self._lock:
            self.requested.append(url)
        final = self.redirects.get(url, url)
        if final not in self.pages:
            raise PageFetchError(url, "404 Client Error: Not Found")
        return Page(url=final, text=clean_text(self.pages[final]))


@pytest.fixture
def legacy_pages() -> Dict[str, str]:
    episode = load_fixture("radiorus_episode.html")
    pages = {
        LEGACY_LISTING: load_fixture("radiorus_episodes.html"),
        LEGACY_ABOUT: load_fixture("radiorus_about.html"),
    }
    for url in LEGACY_EPISODES:
        pages[url] = episode
    return pages


@pytest.fixture
def smotrim_pages() -> Dict[str, str]:
    audio = load_fixture("smotrim_audio.html")
    return {
        SMOTRIM_LISTING: load_fixture("smotrim_brand.html"),
        "https://smotrim.ru/audio/2516561": audio,
        "https://smotrim.ru/audio/2516562": audio,
    }


@pytest.fixture(autouse=True)
def _clear_feed_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "USER_AGENT",
        "HTTP_TIMEOUT",
        "HTTP_RETRIES",
        "DESCRIBE_MAX_WORKERS",
        "BAD_EPISODE_RETRIES",
        "BAD_EPISODE_RETRY_DELAY",
        "LOG_LEVEL",
        "LOG_FORMAT",
        "LOG_DIR",
        "LOG_MAX_BYTES",
        "LOG_BACKUP_COUNT",
    ):
        monkeypatch.delenv(name, raising=False)
