"""
Feed loading (URL or local file -> text).

This is the only place that does I/O on the way into the pipeline.
All failures are reported as FeedError so callers need a single except clause.
"""

from __future__ import annotations

from pathlib import Path

import requests


REQUEST_TIMEOUT = 30.0


class FeedError(Exception):
    """Raised when the feed text cannot be obtained."""


def fetch_feed(url: str, timeout: float = REQUEST_TIMEOUT) -> str:
    """
    Download the calendar feed and return it as text.
    """
    try:
        resp = requests.get(url, timeout=timeout)
    except requests.RequestException as exc:
        raise FeedError(str(exc)) from exc

    if not resp.ok:
        raise FeedError(f"HTTP error! status: {resp.status_code}")

    # Feeds are UTF-8 even when the server does not say so
    if resp.encoding is None or resp.encoding.lower() == "iso-8859-1":
        resp.encoding = "utf-8"
    return resp.text


def read_feed(path: str | Path) -> str:
    """
    Read a calendar feed from a local .ics file.
    """
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise FeedError(str(exc)) from exc
