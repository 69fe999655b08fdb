"""
Command-line entry point.

Examples:
    skeletonizer card.html
    skeletonizer --sample --json
    cat card.html | skeletonizer --preview preview.html
"""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from skeletonizer.core.config import settings
from skeletonizer.services.skeleton_service import (
    SAMPLE_HTML,
    SkeletonReport,
    SkeletonService,
)
from skeletonizer.skeleton.analyzer import SkeletonAnalyzer
from skeletonizer.skeleton.sandbox import SnapshotSandbox


logger = logging.getLogger("skeletonizer.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="skeletonizer",
        description="Generate a loading skeleton from an HTML fragment.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        help="HTML file to analyze (reads stdin when omitted)",
    )
    parser.add_argument(
        "--sample",
        action="store_true",
        help="Analyze the built-in sample profile card",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the full result as JSON instead of component code",
    )
    parser.add_argument(
        "--preview",
        metavar="PATH",
        help="Write the preview page to PATH",
    )
    parser.add_argument(
        "--tolerance",
        type=float,
        default=settings.ROW_TOLERANCE_PX,
        help="Row grouping tolerance in pixels (default: %(default)s)",
    )
    parser.add_argument(
        "--settle-delay",
        type=int,
        default=settings.SETTLE_DELAY_MS,
        help="Milliseconds to wait for styles after load (default: %(default)s)",
    )
    parser.add_argument(
        "--viewport",
        default=f"{settings.VIEWPORT_WIDTH}x{settings.VIEWPORT_HEIGHT}",
        help="Render viewport as WIDTHxHEIGHT (default: %(default)s)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log pipeline progress to stderr",
    )
    return parser


def parse_viewport(value: str) -> tuple:
    """Parse "800x600" into (800, 600)."""
    try:
        width, height = value.lower().split("x", 1)
        return int(width), int(height)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid viewport: {value!r}")


def read_input(args: argparse.Namespace) -> str:
    if args.sample:
        return SAMPLE_HTML
    if args.input:
        return Path(args.input).read_text(encoding="utf-8")
    return sys.stdin.read()


def build_service(args: argparse.Namespace) -> SkeletonService:
    width, height = parse_viewport(args.viewport)
    sandbox = SnapshotSandbox(
        viewport_width=width,
        viewport_height=height,
        load_timeout_ms=settings.LOAD_TIMEOUT_MS,
        settle_delay_ms=args.settle_delay,
        launch_timeout_ms=settings.BROWSER_LAUNCH_TIMEOUT_MS,
        tailwind_url=settings.TAILWIND_CDN_URL,
        body_padding_px=settings.BODY_PADDING_PX,
    )
    return SkeletonService(
        analyzer=SkeletonAnalyzer(sandbox=sandbox),
        row_tolerance=args.tolerance,
    )


def write_output(report: SkeletonReport, args: argparse.Namespace) -> None:
    if args.json:
        print(json.dumps(report.to_dict(), indent=2))
    elif report.error:
        print(f"Error: {report.error}", file=sys.stderr)
    else:
        print(report.code)
        print(report.summary.describe(), file=sys.stderr)

    if args.preview and not report.error:
        Path(args.preview).write_text(report.preview_html, encoding="utf-8")
        logger.info(f"Preview written to {args.preview}")


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.getLogger("skeletonizer").setLevel(
        logging.DEBUG if args.verbose else logging.WARNING
    )

    try:
        service = build_service(args)
    except argparse.ArgumentTypeError as e:
        parser.error(str(e))

    try:
        html = read_input(args)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: cannot read input: {e}", file=sys.stderr)
        return 1

    report = asyncio.run(service.generate(html))
    write_output(report, args)
    return 1 if report.error else 0


if __name__ == "__main__":
    sys.exit(main())
