"""Utility helpers for SVG identity hashing and size formatting."""

from __future__ import annotations

import hashlib
import re

CLASS_ATTR_PATTERN = re.compile(r"""\s+class=(?:"[^"]*"|'[^']*')""")

KILOBYTE = 1024
MEGABYTE = 1024 * 1024


def hash_svg(svg: str) -> str:
    """Digest SVG markup with ``class`` attributes removed.

    Identical icons that only differ in their styling hooks share a digest.
    Whitespace, attribute order and every other attribute stay significant.
    """
    normalized = CLASS_ATTR_PATTERN.sub("", svg)
    return hashlib.md5(normalized.encode("utf-8")).hexdigest()


def byte_length(text: str) -> int:
    """Return the UTF-8 encoded size of ``text``."""
    return len(text.encode("utf-8"))


def format_bytes(size: int) -> str:
    """Format a byte count with KB/MB units while keeping the exact count."""
    if size >= MEGABYTE:
        return f"{size / MEGABYTE:.2f} MB ({size} bytes)"
    if size >= KILOBYTE:
        return f"{size / KILOBYTE:.2f} KB ({size} bytes)"
    return f"{size} bytes"
