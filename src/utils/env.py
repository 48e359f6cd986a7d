#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""Helpers for reading environment variables in a safe way."""

from __future__ import annotations

import logging
import os
from typing import Mapping, Optional

__all__ = [
    "get_int_env",
    "get_str_env",
]

log = logging.getLogger(__name__)


def _raw(name: str, environ: Optional[Mapping[str, str]]) -> Optional[str]:
    env = environ if environ is not None else os.environ
    return env.get(name)


def get_int_env(name: str, default: int, environ: Optional[Mapping[str, str]] = None) -> int:
    """Read integer environment variables safely.

    Returns the provided default if the variable is unset or cannot be
    converted to ``int``. On invalid values, a warning is logged.
    """

    raw = _raw(name, environ)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except (ValueError, TypeError) as e:
        log.warning(
            "Invalid value for %s=%r – using default %d (%s: %s)",
            name,
            raw,
            default,
            type(e).__name__,
            e,
        )
        return default


def get_str_env(name: str, default: str, environ: Optional[Mapping[str, str]] = None) -> str:
    raw = _raw(name, environ)
    if raw is None:
        return default
    stripped = raw.strip()
    return stripped or default
