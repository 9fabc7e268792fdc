"""Document loading from HTTP(S) URLs or local files."""

from __future__ import annotations

import logging
import re
from pathlib import Path

import requests

from .config import DEFAULT_FETCH_TIMEOUT
from .errors import FetchError

logger = logging.getLogger("svg_opti_detector")

URL_PATTERN = re.compile(r"^https?://", re.IGNORECASE)
FILE_URI_PREFIX = "file://"


def is_url(source: str) -> bool:
    return bool(URL_PATTERN.match(source))


def resolve_local_path(source: str) -> Path:
    """Normalize a plain or ``file://`` path to an absolute filesystem path."""
    if source.startswith(FILE_URI_PREFIX):
        source = source[len(FILE_URI_PREFIX):]
    return Path(source).expanduser().resolve()


def fetch_url(url: str, timeout: float = DEFAULT_FETCH_TIMEOUT) -> str:
    """Fetch a page with a single GET; non-2xx responses are failures."""
    try:
        resp = requests.get(url, timeout=timeout)
        resp.raise_for_status()
    except requests.RequestException as exc:
        raise FetchError(f"Failed to fetch {url}: {exc}") from exc

    content_type = resp.headers.get("Content-Type", "")
    if "charset" not in content_type.lower():
        resp.encoding = "utf-8"
    return resp.text


def read_local_file(source: str) -> str:
    path = resolve_local_path(source)
    logger.info("Reading local file: %s", path)
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise FetchError(f"Failed to read {path}: {exc}") from exc


def fetch_html(source: str, timeout: float = DEFAULT_FETCH_TIMEOUT) -> str:
    """Load HTML from a URL or treat anything else as a local path."""
    if is_url(source):
        return fetch_url(source, timeout=timeout)
    return read_local_file(source)
