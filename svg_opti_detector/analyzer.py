"""Batch optimization and duplicate aggregation over extracted SVGs."""

from __future__ import annotations

import asyncio
import logging
import time
from concurrent.futures import Executor, ThreadPoolExecutor
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Protocol, Sequence

from .config import AnalyzerConfig
from .content import extract_inline_svgs
from .fetch import fetch_html
from .models import AnalysisReport, OptimizedSvg, SvgElement, SvgStat
from .optimizer import ScourOptimizer
from .utils import byte_length, hash_svg

logger = logging.getLogger("svg_opti_detector")

ProgressCallback = Callable[[int, int], None]


class Optimizer(Protocol):
    def optimize(self, svg: str) -> OptimizedSvg: ...


@dataclass
class AnalysisRun:
    """Everything produced by analyzing one document."""

    source: str
    svgs: List[SvgElement]
    report: AnalysisReport
    total_seconds: float


async def _optimized_size(
    svg: SvgElement,
    index: int,
    optimizer: Optimizer,
    timeout: Optional[float],
    original_size: int,
    executor: Optional[Executor],
) -> int:
    loop = asyncio.get_running_loop()
    try:
        call = loop.run_in_executor(executor, optimizer.optimize, svg.html)
        if timeout is not None:
            optimized = await asyncio.wait_for(call, timeout)
        else:
            optimized = await call
    except asyncio.TimeoutError:
        logger.warning("Failed to optimize SVG #%d: timed out after %.1fs", index, timeout)
        return original_size
    except Exception as exc:  # pylint: disable=broad-except
        logger.warning("Failed to optimize SVG #%d: %s", index, exc)
        return original_size
    return byte_length(optimized.data)


async def _process_svg(
    svg: SvgElement,
    index: int,
    optimizer: Optimizer,
    timeout: Optional[float],
    executor: Optional[Executor],
) -> SvgStat:
    original_size = byte_length(svg.html)
    optimized_size = await _optimized_size(
        svg, index, optimizer, timeout, original_size, executor
    )
    return SvgStat(
        index=index,
        original_size=original_size,
        optimized_size=optimized_size,
        hash=hash_svg(svg.html),
    )


async def process_svg_batch(
    batch: Sequence[SvgElement],
    start_index: int,
    optimizer: Optimizer,
    timeout: Optional[float] = None,
    executor: Optional[Executor] = None,
) -> List[SvgStat]:
    """Optimize and hash one slice concurrently; results follow input order."""
    tasks = [
        _process_svg(svg, start_index + offset, optimizer, timeout, executor)
        for offset, svg in enumerate(batch)
    ]
    results = await asyncio.gather(*tasks)
    return sorted(results, key=lambda stat: stat.index)


async def analyze_svgs(
    svgs: Sequence[SvgElement],
    optimizer: Optional[Optimizer] = None,
    config: Optional[AnalyzerConfig] = None,
    progress: Optional[ProgressCallback] = None,
) -> AnalysisReport:
    """Process SVGs slice by slice, folding totals and duplicate groups in order."""
    config = config or AnalyzerConfig()
    optimizer = optimizer or ScourOptimizer()
    batch_size = max(1, config.batch_size)

    report = AnalysisReport()
    first_seen: Dict[str, int] = {}
    total_batches = (len(svgs) + batch_size - 1) // batch_size

    # A private pool so timed-out workers do not hold up the event loop's
    # default-executor shutdown. A hung thread still delays interpreter exit.
    executor = ThreadPoolExecutor(max_workers=batch_size, thread_name_prefix="svg-optimize")
    try:
        for batch_number, start_index in enumerate(range(0, len(svgs), batch_size), start=1):
            batch = svgs[start_index:start_index + batch_size]
            batch_results = await process_svg_batch(
                batch, start_index, optimizer, config.optimizer_timeout, executor
            )

            for stat in batch_results:
                report.total_original_size += stat.original_size
                report.total_optimized_size += stat.optimized_size

                if stat.hash in first_seen:
                    stat.is_duplicate = True
                    group = report.duplicates.setdefault(stat.hash, [first_seen[stat.hash]])
                    group.append(stat.index)
                else:
                    first_seen[stat.hash] = stat.index

                report.svg_stats.append(stat)

            if progress is not None:
                progress(batch_number, total_batches)
    finally:
        executor.shutdown(wait=False, cancel_futures=True)

    return report


async def analyze_source(
    source: str,
    config: Optional[AnalyzerConfig] = None,
    optimizer: Optional[Optimizer] = None,
    progress: Optional[ProgressCallback] = None,
) -> AnalysisRun:
    """Fetch a document, extract its inline SVGs and analyze them.

    ``progress`` only fires for documents with more SVGs than
    ``config.progress_threshold``.
    """
    config = config or AnalyzerConfig()
    start = time.perf_counter()

    html = await asyncio.to_thread(fetch_html, source, config.fetch_timeout)
    svgs = extract_inline_svgs(html)
    logger.debug("Extracted %d inline SVG(s) from %s", len(svgs), source)
    if len(svgs) <= config.progress_threshold:
        progress = None

    report = await analyze_svgs(svgs, optimizer=optimizer, config=config, progress=progress)
    total_elapsed = time.perf_counter() - start
    logger.debug("Analyzed %s in %.2fs", source, total_elapsed)
    return AnalysisRun(source=source, svgs=svgs, report=report, total_seconds=total_elapsed)
