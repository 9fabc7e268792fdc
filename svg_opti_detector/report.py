"""Console report rendering for analysis results."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from .models import AnalysisReport, SvgAttributes, SvgElement, SvgStat
from .utils import format_bytes

RULE = "─" * 50
SHORT_RULE = "─" * 35

HIGH_SAVINGS_PERCENT = 20
MEDIUM_SAVINGS_PERCENT = 10

_ANSI = {
    "blue": "\033[94m",
    "green": "\033[92m",
    "yellow": "\033[93m",
    "cyan": "\033[96m",
    "red": "\033[91m",
    "white": "\033[97m",
    "gray": "\033[90m",
    "bold": "\033[1m",
    "reset": "\033[0m",
}


class Palette:
    """Wraps text in ANSI colors, or passes it through when disabled."""

    def __init__(self, enabled: bool = True) -> None:
        self.enabled = enabled

    def paint(self, text: object, *styles: str) -> str:
        if not self.enabled or not styles:
            return str(text)
        prefix = "".join(_ANSI[style] for style in styles)
        return f"{prefix}{text}{_ANSI['reset']}"

    def __getattr__(self, style: str):
        if style not in _ANSI:
            raise AttributeError(style)
        return lambda text, *extra: self.paint(text, style, *extra)


@dataclass
class DuplicateGroupSummary:
    """Advisory savings for one group, keeping its first occurrence."""

    hash: str
    indices: List[int]
    label: str
    original_savings: int
    optimized_savings: int

    @property
    def removable(self) -> int:
        return len(self.indices) - 1


@dataclass
class DuplicateSummary:
    groups: List[DuplicateGroupSummary] = field(default_factory=list)
    original_savings: int = 0
    optimized_savings: int = 0

    @property
    def removable(self) -> int:
        return sum(group.removable for group in self.groups)


def generate_identifier_string(attrs: SvgAttributes) -> str:
    """Join the present identifying attributes as ``name="value"`` pairs."""
    pairs = (
        ("class", attrs.class_),
        ("id", attrs.id),
        ("width", attrs.width),
        ("height", attrs.height),
        ("viewBox", attrs.view_box),
    )
    return ", ".join(f'{name}="{value}"' for name, value in pairs if value)


def display_order(stats: Sequence[SvgStat], sort_by_savings: bool) -> List[int]:
    """Indices in display order; sorting never touches the report itself."""
    order = list(range(len(stats)))
    if sort_by_savings:
        order.sort(
            key=lambda idx: (round(stats[idx].savings_percent, 1), stats[idx].savings),
            reverse=True,
        )
    return order


def summarize_duplicates(
    svgs: Sequence[SvgElement], report: AnalysisReport
) -> DuplicateSummary:
    summary = DuplicateSummary()
    for digest, indices in report.duplicates.items():
        labels: List[str] = []
        for idx in indices:
            css_class = svgs[idx].attributes.class_
            label = f'"{css_class}"' if css_class else "no class"
            if label not in labels:
                labels.append(label)

        to_remove = indices[1:]
        group = DuplicateGroupSummary(
            hash=digest,
            indices=list(indices),
            label=", ".join(labels),
            original_savings=sum(report.svg_stats[idx].original_size for idx in to_remove),
            optimized_savings=sum(report.svg_stats[idx].optimized_size for idx in to_remove),
        )
        summary.groups.append(group)
        summary.original_savings += group.original_savings
        summary.optimized_savings += group.optimized_savings
    return summary


def _percent(part: int, whole: int) -> str:
    if whole <= 0:
        return "0.0"
    return f"{part / whole * 100:.1f}"


def _render_svg_list(
    svgs: Sequence[SvgElement],
    report: AnalysisReport,
    show_duplicates: bool,
    sort_by_savings: bool,
    c: Palette,
) -> List[str]:
    heading = "📋 INDIVIDUAL SVG ANALYSIS"
    if sort_by_savings:
        heading += " (Sorted by Optimization Potential)"
    lines = ["", c.blue(heading, "bold"), RULE]

    for idx in display_order(report.svg_stats, sort_by_savings):
        stat = report.svg_stats[idx]
        percent = stat.savings_percent
        if percent >= HIGH_SAVINGS_PERCENT:
            icon, color = "🔴", c.red
        elif percent >= MEDIUM_SAVINGS_PERCENT:
            icon, color = "🟡", c.yellow
        else:
            icon, color = "✅", c.green

        identifiers = generate_identifier_string(svgs[idx].attributes)
        header = f"{icon} SVG #{idx}"
        if identifiers:
            header += f" ({c.gray(identifiers)})"
        if show_duplicates and stat.is_duplicate:
            header += c.red(" [DUPLICATE]")
        if sort_by_savings:
            header += c.gray(f" [Original #{idx}]")

        lines.append(header)
        lines.append(
            f"   Original: {format_bytes(stat.original_size)}"
            f" | Optimized: {format_bytes(stat.optimized_size)}"
        )
        lines.append(f"   {color(f'Savings: {format_bytes(stat.savings)}')}")
        lines.append("")
    return lines


def _render_duplicates(
    svgs: Sequence[SvgElement], report: AnalysisReport, c: Palette
) -> List[str]:
    summary = summarize_duplicates(svgs, report)
    lines = [c.red("⚠️  DUPLICATE SVGs DETECTED", "bold"), RULE]

    for number, group in enumerate(summary.groups, start=1):
        indices = ", ".join(str(idx) for idx in group.indices)
        lines.append(f"{c.red('●')} {c.paint(f'Group {number}:', 'bold')} {group.label}")
        lines.append(f"   Found at indices: [{c.yellow(indices)}]")
        lines.append(
            f"   Occurrences: {c.cyan(len(group.indices))}"
            f" ({c.red(group.removable)} duplicates)"
        )
        lines.append(f"   Potential savings: {c.green(format_bytes(group.optimized_savings))}")
        lines.append("")

    dedup_only = report.total_original_size - summary.original_savings
    dedup_and_optimized = report.total_optimized_size - summary.optimized_savings
    combined = report.total_savings + summary.optimized_savings

    lines += [
        c.yellow("💡 DUPLICATE REMOVAL SUMMARY", "bold"),
        SHORT_RULE,
        f"{c.cyan('Duplicate groups found:')} {len(summary.groups)}",
        f"{c.cyan('Total duplicates to remove:')} {summary.removable}",
        "",
        c.white("📈 DEDUPLICATION SCENARIOS:", "bold"),
        f"{c.gray('Original total size (baseline):')} {format_bytes(report.total_original_size)}",
        "",
        c.blue("Scenario 1 - Deduplication only (no optimization):"),
        f"   Total size after deduplication: {format_bytes(dedup_only)}",
        f"   Savings from deduplication: {format_bytes(summary.original_savings)}",
        "",
        c.blue("Scenario 2 - Deduplication + optimization:"),
        f"   Total size after both optimizations: {format_bytes(dedup_and_optimized)}",
        f"   Savings from deduplication: {format_bytes(summary.optimized_savings)}",
        "",
        c.green("🎯 MAXIMUM SAVINGS POTENTIAL:", "bold"),
        f"{c.green('Combined savings (optimization + deduplication):')} "
        f"{format_bytes(combined)} ({_percent(combined, report.total_original_size)}%)",
        f"{c.green('Final optimized & deduplicated size:')} {format_bytes(dedup_and_optimized)}",
        "",
    ]
    return lines


def _render_summary(
    svgs: Sequence[SvgElement],
    report: AnalysisReport,
    elapsed_seconds: Optional[float],
    c: Palette,
) -> List[str]:
    lines = [
        c.blue("📊 ANALYSIS RESULTS", "bold"),
        RULE,
        c.cyan(f"Total SVGs found: {len(svgs)}"),
        c.cyan(f"Total original size: {format_bytes(report.total_original_size)}"),
        c.cyan(f"Total optimized size: {format_bytes(report.total_optimized_size)}"),
    ]
    if report.total_savings > 0:
        lines.append(c.green(f"Total potential savings: {format_bytes(report.total_savings)}"))
    if elapsed_seconds is not None:
        lines.append(c.gray(f"\nExecution time: {round(elapsed_seconds * 1000)}ms"))
    return lines


def render_report(
    svgs: Sequence[SvgElement],
    report: AnalysisReport,
    show_duplicates: bool = False,
    sort_by_savings: bool = False,
    elapsed_seconds: Optional[float] = None,
    color: bool = True,
) -> str:
    """Render the full console report as a single string."""
    c = Palette(enabled=color)
    lines = [c.cyan(f"Found {len(svgs)} SVG(s) to analyze...")]
    if not svgs:
        lines.append(c.yellow("No inline SVGs found."))
        return "\n".join(lines) + "\n"

    lines += _render_svg_list(svgs, report, show_duplicates, sort_by_savings, c)
    if show_duplicates and report.duplicates:
        lines += _render_duplicates(svgs, report, c)
    lines += _render_summary(svgs, report, elapsed_seconds, c)
    return "\n".join(lines) + "\n"
