"""SVG optimization backed by scour."""

from __future__ import annotations

import logging
import re

from bs4 import BeautifulSoup
from bs4.formatter import XMLFormatter
from scour import scour

from .config import DEFAULT_OPTIMIZER_CONFIG, OptimizerConfig
from .errors import OptimizerError
from .models import OptimizedSvg

logger = logging.getLogger("svg_opti_detector")

XLINK_NAMESPACE = "http://www.w3.org/1999/xlink"
SVG_NAMESPACE = "http://www.w3.org/2000/svg"
_ROOT_TAG_PATTERN = re.compile(r"^(\s*<svg)\b")
_ROOT_XMLNS_PATTERN = re.compile(r"^\s*<svg\b[^>]*\sxmlns\s*=")
_SVG_XMLNS_PATTERN = re.compile(
    r"^(\s*<svg\b[^>]*?)\s+xmlns=[\"']" + re.escape(SVG_NAMESPACE) + r"[\"']"
)


class _SourceOrderFormatter(XMLFormatter):
    def attributes(self, tag):
        return list(tag.attrs.items())


def declare_xlink_namespace(svg: str) -> str:
    """Add the xlink namespace when inline markup uses the prefix undeclared.

    HTML parsers accept ``xlink:href`` without a declaration, XML parsers do not.
    """
    if "xlink:" not in svg or "xmlns:xlink" in svg:
        return svg
    return _ROOT_TAG_PATTERN.sub(rf'\1 xmlns:xlink="{XLINK_NAMESPACE}"', svg, count=1)


def remove_dimensions(svg: str) -> str:
    """Drop root ``width``/``height`` when a ``viewBox`` already defines the canvas."""
    soup = BeautifulSoup(svg, "xml")
    root = soup.find("svg")
    if root is None or not root.get("viewBox"):
        return svg
    if "width" not in root.attrs and "height" not in root.attrs:
        return svg
    del root["width"]
    del root["height"]
    return root.decode(formatter=_SourceOrderFormatter())


def has_default_namespace(svg: str) -> bool:
    return bool(_ROOT_XMLNS_PATTERN.match(svg))


def remove_svg_namespace(svg: str) -> str:
    """Drop the default SVG namespace from the root tag; inline HTML SVG does not need it."""
    return _SVG_XMLNS_PATTERN.sub(r"\1", svg, count=1)


class ScourOptimizer:
    """Thin wrapper around scour configured once per run."""

    def __init__(self, config: OptimizerConfig = DEFAULT_OPTIMIZER_CONFIG) -> None:
        self.config = config
        self._options = self._build_options(config)

    @staticmethod
    def _build_options(config: OptimizerConfig):
        options = scour.sanitizeOptions()
        options.quiet = True
        options.strip_xml_prolog = True
        options.strip_ids = True
        options.shorten_ids = True
        options.indent_type = "none"
        options.newlines = False
        options.strip_comments = config.strip_comments
        options.remove_metadata = config.remove_metadata
        options.keep_editor_data = not config.remove_editor_data
        return options

    def _scour(self, svg: str) -> str:
        try:
            return scour.scourString(svg, self._options)
        except Exception as exc:  # pylint: disable=broad-except
            raise OptimizerError(str(exc) or exc.__class__.__name__) from exc

    def optimize(self, svg: str) -> OptimizedSvg:
        """Optimize one SVG; repeats passes while the output keeps shrinking."""
        data = self._scour(declare_xlink_namespace(svg))
        passes = 1
        while self.config.multipass and passes < self.config.max_passes:
            candidate = self._scour(data)
            if len(candidate) >= len(data):
                break
            data = candidate
            passes += 1

        if self.config.remove_dimensions:
            data = remove_dimensions(data)
        # scour always declares the SVG namespace; keep the input's choice.
        if not has_default_namespace(svg):
            data = remove_svg_namespace(data)
        logger.debug("Optimized SVG in %d pass%s", passes, "" if passes == 1 else "es")
        return OptimizedSvg(data=data.strip(), passes=passes)
