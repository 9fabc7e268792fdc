"""Exception types raised by the analyzer."""

from __future__ import annotations


class SvgOptiError(Exception):
    """Base class for analyzer errors."""


class ParseError(SvgOptiError):
    """Markup could not be parsed at all."""


class FetchError(SvgOptiError):
    """The document could not be fetched or read."""


class OptimizerError(SvgOptiError):
    """The optimizer rejected a single SVG."""
