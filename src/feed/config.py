"""Configuration helpers for the feed builder."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from ..utils.dates import MOSCOW
from ..utils.env import get_int_env, get_str_env
from ..utils.http import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT

LOG_TIMEZONE = MOSCOW

DEFAULT_BRAND = "57083"  # Aerostat
LEGACY_LISTING_URL = "https://www.radiorus.ru/brand/{brand}/episodes"
REDESIGNED_LISTING_URL = "https://smotrim.ru/brand/{brand}"
OUTPUT_NAME = "radiorus-{brand}.rss"


@dataclass(frozen=True)
class FeedSettings:
    """Key feed builder settings derived from environment variables."""

    user_agent: str = DEFAULT_USER_AGENT
    http_timeout: int = DEFAULT_TIMEOUT
    http_retries: int = 4
    describe_max_workers: int = 0
    bad_episode_retries: int = 3
    bad_episode_retry_delay: int = 30
    log_level: str = "INFO"
    log_format: str = "plain"
    log_dir: Optional[Path] = None
    log_max_bytes: int = 1_000_000
    log_backup_count: int = 5


def build_settings(environ: Optional[Mapping[str, str]] = None) -> FeedSettings:
    """Assemble the active feed settings based on environment variables."""

    log_dir_raw = get_str_env("LOG_DIR", "", environ)
    return FeedSettings(
        user_agent=get_str_env("USER_AGENT", DEFAULT_USER_AGENT, environ),
        http_timeout=max(get_int_env("HTTP_TIMEOUT", DEFAULT_TIMEOUT, environ), 1),
        http_retries=max(get_int_env("HTTP_RETRIES", 4, environ), 0),
        describe_max_workers=max(get_int_env("DESCRIBE_MAX_WORKERS", 0, environ), 0),
        bad_episode_retries=max(get_int_env("BAD_EPISODE_RETRIES", 3, environ), 0),
        bad_episode_retry_delay=max(get_int_env("BAD_EPISODE_RETRY_DELAY", 30, environ), 0),
        log_level=get_str_env("LOG_LEVEL", "INFO", environ).upper(),
        log_format=get_str_env("LOG_FORMAT", "plain", environ).lower(),
        log_dir=Path(log_dir_raw) if log_dir_raw else None,
        log_max_bytes=max(get_int_env("LOG_MAX_BYTES", 1_000_000, environ), 0),
        log_backup_count=max(get_int_env("LOG_BACKUP_COUNT", 5, environ), 0),
    )


def listing_url(brand: str, *, redesigned: bool = False) -> str:
    """Return the programme listing URL for ``brand``."""

    template = REDESIGNED_LISTING_URL if redesigned else LEGACY_LISTING_URL
    return template.format(brand=brand)


def output_path(directory: str | Path, brand: str) -> Path:
    return Path(directory) / OUTPUT_NAME.format(brand=brand)


__all__ = [
    "DEFAULT_BRAND",
    "FeedSettings",
    "LOG_TIMEZONE",
    "build_settings",
    "listing_url",
    "output_path",
]
