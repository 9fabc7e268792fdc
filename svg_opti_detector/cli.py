"""Command-line entry point for the SVG optimization detector."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import Sequence

from .analyzer import analyze_source
from .config import AnalyzerConfig
from .errors import FetchError, ParseError
from .report import render_report

logger = logging.getLogger("svg_opti_detector.cli")


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="svg-opti-detector",
        description=(
            "Estimate optimization savings for the inline SVGs of an HTML page "
            "and detect duplicates that differ only in their class attribute."
        ),
    )
    parser.add_argument("source", help="URL or local file path of the HTML document")
    parser.add_argument(
        "-d",
        "--duplicates",
        action="store_true",
        help="Show duplicate SVG analysis",
    )
    parser.add_argument(
        "-s",
        "--sort-by-savings",
        action="store_true",
        help="Sort SVGs by optimization potential (highest savings first)",
    )
    return parser.parse_args(argv)


class ProgressPrinter:
    """Writes a percentage line after each processed batch."""

    def __init__(self, stream=None) -> None:
        self.stream = stream if stream is not None else sys.stderr
        self.active = False

    def __call__(self, done: int, total: int) -> None:
        self.active = True
        percent = round(done / total * 100) if total else 100
        self.stream.write(f"\rProcessing SVGs... {percent}%")
        self.stream.flush()

    def finish(self) -> None:
        if self.active:
            self.stream.write("\n")
            self.stream.flush()


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True,
    )

    config = AnalyzerConfig()
    printer = ProgressPrinter()
    print("🔍 SVG Opti Detector script started.\n")
    try:
        run = asyncio.run(analyze_source(args.source, config=config, progress=printer))
    except (FetchError, ParseError) as exc:
        printer.finish()
        logger.error("%s", exc)
        return 1
    printer.finish()

    sys.stdout.write(
        render_report(
            run.svgs,
            run.report,
            show_duplicates=args.duplicates,
            sort_by_savings=args.sort_by_savings,
            elapsed_seconds=run.total_seconds,
            color=sys.stdout.isatty(),
        )
    )
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
