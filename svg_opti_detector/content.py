"""HTML parsing and inline SVG extraction."""

from __future__ import annotations

from typing import List, Optional

from bs4 import BeautifulSoup, Tag
from bs4.formatter import HTMLFormatter

from .errors import ParseError
from .models import SvgAttributes, SvgElement

# html5lib restores SVG attribute casing, so ``viewBox`` survives parsing.
_PARSER = "html5lib"


class _SourceOrderFormatter(HTMLFormatter):
    """Serializes attributes in document order instead of sorting them."""

    def attributes(self, tag):
        return list(tag.attrs.items())


_FORMATTER = _SourceOrderFormatter()


def _attribute(tag: Tag, name: str) -> Optional[str]:
    value = tag.get(name)
    if isinstance(value, list):
        value = " ".join(value)
    return value or None


def _snapshot_attributes(tag: Tag) -> SvgAttributes:
    return SvgAttributes(
        class_=_attribute(tag, "class"),
        id=_attribute(tag, "id"),
        width=_attribute(tag, "width"),
        height=_attribute(tag, "height"),
        view_box=_attribute(tag, "viewBox"),
    )


def parse_html(html: str) -> BeautifulSoup:
    """Parse markup with browser-grade error recovery."""
    if not isinstance(html, (str, bytes)):
        raise ParseError(f"Expected markup text, got {type(html).__name__}")
    try:
        return BeautifulSoup(html, _PARSER)
    except Exception as exc:  # pylint: disable=broad-except
        raise ParseError(f"Unable to parse document: {exc}") from exc


def extract_inline_svgs(html: str) -> List[SvgElement]:
    """Return every inline ``<svg>`` subtree in document order."""
    soup = parse_html(html)
    return [
        SvgElement(html=svg.decode(formatter=_FORMATTER), attributes=_snapshot_attributes(svg))
        for svg in soup.find_all("svg")
    ]
