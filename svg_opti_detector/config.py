"""Configuration objects and constants for the analyzer."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_BATCH_SIZE = 10
DEFAULT_OPTIMIZER_TIMEOUT = 30.0
DEFAULT_FETCH_TIMEOUT = 30.0
PROGRESS_THRESHOLD = 20


@dataclass
class AnalyzerConfig:
    """Top-level settings that control fetching and batch analysis."""

    batch_size: int = DEFAULT_BATCH_SIZE
    optimizer_timeout: float | None = DEFAULT_OPTIMIZER_TIMEOUT
    fetch_timeout: float = DEFAULT_FETCH_TIMEOUT
    progress_threshold: int = PROGRESS_THRESHOLD


@dataclass(frozen=True)
class OptimizerConfig:
    """Fixed optimizer settings applied to every SVG in a run."""

    multipass: bool = True
    max_passes: int = 10
    remove_dimensions: bool = True
    strip_comments: bool = True
    remove_metadata: bool = True
    remove_editor_data: bool = True


DEFAULT_OPTIMIZER_CONFIG = OptimizerConfig()
