"""HTTP helpers for configuring :mod:`requests` sessions and fetching pages."""

from __future__ import annotations

import codecs
import logging
import re
from dataclasses import dataclass
from typing import Any, Callable
from urllib.parse import urlparse

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from ..feed.errors import PageFetchError
from .text import clean_text

_DEFAULT_RETRY_OPTIONS: dict[str, Any] = {
    "total": 4,
    "backoff_factor": 0.6,
    "status_forcelist": (429, 500, 502, 503, 504),
    "allowed_methods": ("GET",),
}

# Default timeout in seconds if none is provided
DEFAULT_TIMEOUT = 20

# radiorus.ru rejects unknown clients; pose as a desktop browser.
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/39.0.2171.27 Safari/537.36"
)

# Limit page size; programme pages are well below this.
MAX_PAGE_BYTES = 10 * 1024 * 1024

log = logging.getLogger(__name__)


class TimeoutHTTPAdapter(HTTPAdapter):
    """HTTPAdapter that enforces a default timeout."""

    def __init__(self, *args: Any, timeout: int | None = None, **kwargs: Any) -> None:
        self.timeout = timeout
        super().__init__(*args, **kwargs)

    def send(self, request: requests.PreparedRequest, **kwargs: Any) -> requests.Response:
        if kwargs.get("timeout") is None:
            kwargs["timeout"] = self.timeout
        return super().send(request, **kwargs)


def session_with_retries(
    user_agent: str = DEFAULT_USER_AGENT, timeout: int = DEFAULT_TIMEOUT, **retry_opts: Any
) -> requests.Session:
    """Return a :class:`requests.Session` pre-configured with retries and a default timeout.

    Args:
        user_agent: User-Agent header that should be sent with every request.
        timeout: Default timeout in seconds for requests (default: 20).
        **retry_opts: Additional keyword arguments forwarded to
            :class:`urllib3.util.retry.Retry`.
    """

    options = {**_DEFAULT_RETRY_OPTIONS, **retry_opts}
    session = requests.Session()
    retry = Retry(**options)
    adapter = TimeoutHTTPAdapter(max_retries=retry, timeout=timeout)
    session.mount("http://", adapter)
    session.mount("https://", adapter)
    session.headers.update({"User-Agent": user_agent})
    return session


# Block control characters and whitespace in URLs to prevent log injection
_UNSAFE_URL_CHARS = re.compile(r"[\s\x00-\x1f\x7f]")

MAX_URL_LENGTH = 2048


def validate_http_url(url: str | None) -> str | None:
    """Ensure the given URL is valid and uses http or https.

    Returns the URL (stripped) if valid, or ``None`` if invalid/empty/wrong scheme
    or if it contains control characters or embedded credentials.
    """
    if not url:
        return None

    candidate = url.strip()
    if not candidate or len(candidate) > MAX_URL_LENGTH:
        return None

    if _UNSAFE_URL_CHARS.search(candidate):
        return None

    try:
        parsed = urlparse(candidate)
    except ValueError:
        return None
    if parsed.scheme.lower() not in ("http", "https"):
        return None
    if parsed.username or parsed.password:
        return None
    if not parsed.hostname:
        return None
    return candidate


@dataclass(frozen=True)
class Page:
    """A fetched page: final URL after redirects plus normalized body text."""

    url: str
    text: str


def _response_encoding(response: requests.Response) -> str:
    content_type = response.headers.get("Content-Type", "")
    if "charset=" in content_type.lower() and response.encoding:
        try:
            return codecs.lookup(response.encoding).name
        except LookupError:
            log.warning("Unknown charset %r for %s – decoding as UTF-8", response.encoding, response.url)
    return "utf-8"


def fetch_page(
    session: requests.Session,
    url: str,
    max_bytes: int = MAX_PAGE_BYTES,
    timeout: int | None = None,
    **kwargs: Any,
) -> Page:
    """Fetch ``url`` with a size limit and return the normalized page.

    Raises:
        ValueError: If the URL is invalid or the body exceeds ``max_bytes``.
        requests.RequestException: For network errors and non-2xx responses.
    """
    if not validate_http_url(url):
        raise ValueError(f"Unsafe or invalid URL: {url!r}")

    with session.get(url, stream=True, timeout=timeout, **kwargs) as r:
        r.raise_for_status()

        content_length = r.headers.get("Content-Length")
        if content_length and content_length.isdigit() and int(content_length) > max_bytes:
            raise ValueError(f"Content-Length exceeds {max_bytes} bytes")

        chunks = []
        received = 0
        for chunk in r.iter_content(chunk_size=8192):
            chunks.append(chunk)
            received += len(chunk)
            if received > max_bytes:
                raise ValueError(f"Response too large (> {max_bytes} bytes)")
        body = b"".join(chunks).decode(_response_encoding(r), errors="replace")
        return Page(url=r.url or url, text=clean_text(body))


class HttpPageSource:
    """Page source backed by :mod:`requests`.

    A fresh session is used per call so the source can be shared between
    description-fetch threads.
    """

    def __init__(
        self,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: int = DEFAULT_TIMEOUT,
        retries: int = 4,
        session_factory: Callable[..., requests.Session] = session_with_retries,
    ) -> None:
        self.user_agent = user_agent
        self.timeout = timeout
        self.retries = retries
        self._session_factory = session_factory

    def fetch(self, url: str) -> Page:
        try:
            with self._session_factory(
                self.user_agent, timeout=self.timeout, total=self.retries
            ) as session:
                page = fetch_page(session, url, timeout=self.timeout)
        except (requests.RequestException, ValueError, LookupError) as exc:
            raise PageFetchError(url, exc) from exc
        log.debug("Fetched %s (%d chars)", page.url, len(page.text))
        return page


__all__ = [
    "DEFAULT_TIMEOUT",
    "DEFAULT_USER_AGENT",
    "HttpPageSource",
    "Page",
    "TimeoutHTTPAdapter",
    "fetch_page",
    "session_with_retries",
    "validate_http_url",
]
