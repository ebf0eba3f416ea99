"""
Module: cli

Purpose:
    Command line entry point: export a rendered report (PDF or image)
    as a paginated PDF, a numbered PNG sequence or a single snapshot.

Key Functions:
    - main(): Parse arguments and run the export
    - renderer_for(): Pick a renderer from the input file type

Dependencies:
    - argparse (std)
    - exporter: Export pipeline

Example:
    $ report-pager report.pdf --subject "Jane Doe" --mode sequence --out exports/
"""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import date
from pathlib import Path
from typing import List, Optional

from report_pager import __version__
from report_pager.core.models import OutputMode
from report_pager.exporter import (
    ExportBusyError,
    ExportError,
    ExportGuard,
    ExportRequest,
    ImageRenderer,
    PdfRenderer,
    Renderer,
    export_report,
    load_config,
)
from report_pager.exporter.rendering import exclude_non_printable, include_all

logger = logging.getLogger("report_pager")

LOCK_FILENAME = ".report_pager.lock"

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_BUSY = 2


def renderer_for(path: Path) -> Renderer:
    """PdfRenderer for .pdf inputs, ImageRenderer for everything else."""
    if path.suffix.lower() == ".pdf":
        return PdfRenderer()
    return ImageRenderer()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="report-pager",
        description="Export a tall rendered report into whitespace-aware pages",
    )
    parser.add_argument("input", type=Path, help="Rendered report (PDF or image)")
    parser.add_argument("--subject", required=True, help="Report subject, e.g. the client's name")
    parser.add_argument(
        "--mode",
        choices=[m.value for m in OutputMode],
        default=OutputMode.DOCUMENT.value,
        help="Output mode (default: document)",
    )
    parser.add_argument("--kind", help="File name prefix (default depends on mode)")
    parser.add_argument("--date", type=date.fromisoformat, help="Export date, YYYY-MM-DD (default: today)")
    parser.add_argument("--out", type=Path, default=Path("."), help="Output directory")
    parser.add_argument("--config", type=Path, help="JSON settings file")
    parser.add_argument(
        "--density",
        type=float,
        help="Pixel density multiplier for PDF inputs (images are used at native size)",
    )
    parser.add_argument("--margin-mm", type=float, help="Top/bottom page margin in mm")
    parser.add_argument("--settle", type=float, help="Settling delay before rendering, seconds")
    parser.add_argument(
        "--keep-annotations",
        action="store_true",
        help="Render every PDF annotation, including non-printable ones",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
    )

    try:
        config = load_config(args.config).with_overrides(
            pixel_density=args.density,
            margin_mm=args.margin_mm,
            settle_delay_s=args.settle,
        )
        request = ExportRequest(
            subject=args.subject,
            mode=OutputMode(args.mode),
            output_dir=args.out,
            kind=args.kind,
            export_date=args.date,
            exclude=include_all if args.keep_annotations else exclude_non_printable,
        )
    except ValueError as e:
        parser.error(str(e))

    guard = ExportGuard(lock_path=args.out / LOCK_FILENAME)

    try:
        result = export_report(args.input, renderer_for(args.input), request, config, guard=guard)
    except ExportBusyError as e:
        print(str(e), file=sys.stderr)
        return EXIT_BUSY
    except ExportError as e:
        print(str(e), file=sys.stderr)
        return EXIT_FAILED

    for path in result.paths:
        print(path)
    return EXIT_OK
