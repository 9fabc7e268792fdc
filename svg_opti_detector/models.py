"""Data models used throughout the analysis pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass(frozen=True)
class SvgAttributes:
    """Identifying attributes snapshotted from an inline SVG element."""

    class_: Optional[str] = None
    id: Optional[str] = None
    width: Optional[str] = None
    height: Optional[str] = None
    view_box: Optional[str] = None


@dataclass(frozen=True)
class SvgElement:
    """Serialized inline SVG subtree discovered in a document."""

    html: str
    attributes: SvgAttributes = field(default_factory=SvgAttributes)


@dataclass
class SvgStat:
    """Size and identity details for a single analyzed SVG."""

    index: int
    original_size: int
    optimized_size: int
    hash: str
    is_duplicate: bool = False

    @property
    def savings(self) -> int:
        return self.original_size - self.optimized_size

    @property
    def savings_percent(self) -> float:
        if self.original_size <= 0:
            return 0.0
        return self.savings / self.original_size * 100


@dataclass
class AnalysisReport:
    """Aggregated totals, per-SVG stats and duplicate groups for one run."""

    total_original_size: int = 0
    total_optimized_size: int = 0
    svg_stats: List[SvgStat] = field(default_factory=list)
    duplicates: Dict[str, List[int]] = field(default_factory=dict)

    @property
    def total_savings(self) -> int:
        return self.total_original_size - self.total_optimized_size


@dataclass
class OptimizedSvg:
    """Optimizer output for one SVG."""

    data: str
    passes: int = 1
