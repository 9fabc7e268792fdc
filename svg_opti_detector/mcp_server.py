"""MCP server exposing the inline SVG analysis as a tool."""

from __future__ import annotations

import logging

from mcp.server.fastmcp import FastMCP

from .analyzer import analyze_source
from .config import AnalyzerConfig
from .report import render_report

logger = logging.getLogger("svg_opti_detector.mcp")
logger.setLevel(logging.ERROR)

mcp = FastMCP(name="svg-opti-detector")


@mcp.tool()
async def analyze(
    source: str,
    duplicates: bool = False,
    sort_by_savings: bool = False,
) -> str:
    """Report optimization savings and duplicates for the inline SVGs of a page or file."""

    run = await analyze_source(source, config=AnalyzerConfig())
    return render_report(
        run.svgs,
        run.report,
        show_duplicates=duplicates,
        sort_by_savings=sort_by_savings,
        elapsed_seconds=run.total_seconds,
        color=False,
    )


def main() -> None:
    """Entry point for running the MCP server."""
    logging.basicConfig(level=logging.ERROR)
    mcp.run()


if __name__ == "__main__":
    main()
