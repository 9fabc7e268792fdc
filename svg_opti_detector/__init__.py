"""Inline SVG optimization and duplicate detection for HTML documents."""

from .analyzer import analyze_source, analyze_svgs, process_svg_batch
from .config import AnalyzerConfig, OptimizerConfig
from .content import extract_inline_svgs
from .errors import FetchError, OptimizerError, ParseError, SvgOptiError
from .models import AnalysisReport, OptimizedSvg, SvgAttributes, SvgElement, SvgStat
from .optimizer import ScourOptimizer
from .report import generate_identifier_string, render_report
from .utils import format_bytes, hash_svg

__all__ = [
    "AnalysisReport",
    "AnalyzerConfig",
    "FetchError",
    "OptimizedSvg",
    "OptimizerConfig",
    "OptimizerError",
    "ParseError",
    "ScourOptimizer",
    "SvgAttributes",
    "SvgElement",
    "SvgOptiError",
    "SvgStat",
    "analyze_source",
    "analyze_svgs",
    "extract_inline_svgs",
    "format_bytes",
    "generate_identifier_string",
    "hash_svg",
    "process_svg_batch",
    "render_report",
]
