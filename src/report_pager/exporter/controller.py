"""
Module: exporter.controller

Purpose:
    Orchestrate a complete report export.
    Guard → Settle → Render → Paginate → Render pages → Encode → Write

Key Functions:
    - export_report(): Main entry point for exporting a report

Key Classes:
    - ExportRequest: What to export and where
    - ExportResult: Written files and the executed job

Dependencies:
    - exporter.rendering: Renderer boundary
    - exporter.layout: Geometry and pagination
    - exporter.output: Encoding and writing
    - exporter.guard: One export at a time

Used By:
    - cli: Command line export
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import Any, Callable, List, Optional

from report_pager.core.models import (
    ExportJob,
    OutputMode,
    Page,
    PageGeometry,
    RasterBuffer,
)

from .config import ExportConfig
from .errors import ExportError, ExportFailure, RenderFailure
from .guard import DEFAULT_GUARD, ExportGuard
from .layout import compute_geometry, paginate
from .output import (
    default_kind,
    document_filename,
    encode_pages,
    encode_png,
    snapshot_filename,
    write_document,
    write_sequence,
    write_snapshot,
)
from .rendering import RenderOptions, Renderer, exclude_non_printable
from .timing import TimingLog, timed_phase

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExportRequest:
    """
    Export request (immutable).

    Attributes:
        subject: Subject of the report, e.g. the client's name
        mode: Output mode
        output_dir: Directory for written files
        kind: File name prefix; defaults per mode (Report/FullReport/Dashboard)
        export_date: Date used in file names; defaults to today
        exclude: Predicate for elements the renderer should leave out

    Example:
        >>> request = ExportRequest(subject="Jane Doe", mode=OutputMode.SEQUENCE)
        >>> request.resolved_kind
        'Report'
    """

    subject: str
    mode: OutputMode = OutputMode.DOCUMENT
    output_dir: Path = Path(".")
    kind: Optional[str] = None
    export_date: Optional[date] = None
    exclude: Callable[[Any], bool] = field(default=exclude_non_printable)

    def __post_init__(self) -> None:
        """Validate request on construction."""
        if not self.subject or not self.subject.strip():
            raise ValueError("subject must not be empty")

    @property
    def resolved_kind(self) -> str:
        """Kind prefix used in file names."""
        return self.kind or default_kind(self.mode)

    @property
    def iso_date(self) -> str:
        """Export date as YYYY-MM-DD."""
        return (self.export_date or date.today()).isoformat()


@dataclass(frozen=True)
class ExportResult:
    """
    Result of a finished export.

    Attributes:
        paths: Written files (one PDF, one snapshot, or one file per page)
        job: Executed job (pages, geometry, mode)
        timings: Phase durations

    Example:
        >>> result = export_report(Path("report.pdf"), PdfRenderer(), request)
        >>> print(f"Wrote {result.page_count} pages to {result.paths[0]}")
    """

    paths: tuple[Path, ...]
    job: ExportJob
    timings: TimingLog

    @property
    def mode(self) -> OutputMode:
        return self.job.mode

    @property
    def page_count(self) -> int:
        return self.job.page_count

    @property
    def pages(self) -> tuple[Page, ...]:
        return self.job.pages

    @property
    def geometry(self) -> PageGeometry:
        return self.job.geometry

    @property
    def elapsed_s(self) -> float:
        """Time spent in recorded phases."""
        return self.timings.total


def export_report(
    node: Any,
    renderer: Renderer,
    request: ExportRequest,
    config: Optional[ExportConfig] = None,
    *,
    guard: ExportGuard = DEFAULT_GUARD,
    sleep: Callable[[float], None] = time.sleep,
) -> ExportResult:
    """
    Export a report from start to finish.

    Pipeline:
    1. Take the export permit (reject if busy)
    2. Wait the settling delay
    3. Render the report to one RasterBuffer
    4. Compute page geometry and paginate (skipped for snapshots)
    5. Render and encode pages
    6. Write the PDF, page sequence or snapshot

    Nothing is written unless every page rendered and encoded.

    Args:
        node: Report handle understood by `renderer`
        renderer: Renderer producing the RasterBuffer
        request: Output mode, naming and destination
        config: Export configuration (defaults if None)
        guard: Single-permit guard shared by concurrent callers
        sleep: Sleep function used for the settling delay

    Returns:
        ExportResult with written paths

    Raises:
        ExportBusyError: If another export is in progress
        ExportError: If rendering, encoding or writing fails

    Example:
        >>> request = ExportRequest(subject="Jane Doe", output_dir=Path("exports"))
        >>> result = export_report(Path("report.pdf"), PdfRenderer(), request)
    """
    config = config or ExportConfig()

    with guard.hold():
        start_time = time.perf_counter()
        logger.info(f"Starting {request.mode.value} export for {request.subject!r}")
        try:
            result = _run_export(node, renderer, request, config, sleep)
        except ExportFailure as e:
            logger.error(f"Export failed ({type(e).__name__}): {e}")
            raise ExportError() from e

        elapsed = time.perf_counter() - start_time
        logger.info(
            f"Export completed in {elapsed:.2f}s: {result.page_count} pages "
            f"({result.timings.summary()})"
        )
        return result


def _run_export(
    node: Any,
    renderer: Renderer,
    request: ExportRequest,
    config: ExportConfig,
    sleep: Callable[[float], None],
) -> ExportResult:
    timings = TimingLog()

    # Late-loading glyphs/icons get a fixed window to finish painting
    if config.settle_delay_s > 0:
        with timed_phase(timings, "settle"):
            sleep(config.settle_delay_s)

    options = RenderOptions(
        pixel_density=config.pixel_density,
        background_color=config.background_color,
        exclude=request.exclude,
    )
    with timed_phase(timings, "render"):
        buffer = _render(node, renderer, options)

    if request.mode is OutputMode.SNAPSHOT:
        return _export_snapshot(buffer, request, config, timings)

    try:
        geometry = compute_geometry(
            buffer.width,
            page_width_mm=config.page_width_mm,
            page_height_mm=config.page_height_mm,
            margin_mm=config.margin_mm,
        )
    except ValueError as e:
        raise RenderFailure(f"Rendered buffer too small to paginate: {e}") from e

    logger.info(
        f"Page geometry: {geometry.page_width_px}x{geometry.page_height_px}px, "
        f"margin {geometry.margin_px}px"
    )

    with timed_phase(timings, "paginate"):
        pages = paginate(buffer, geometry, config)
    job = ExportJob(pages=pages, geometry=geometry, mode=request.mode)

    with timed_phase(timings, "encode"):
        encoded = encode_pages(
            pages,
            buffer,
            geometry,
            background=config.background_color,
            compress_level=config.png_compress_level,
            max_workers=config.max_workers,
        )

    paths: List[Path]
    with timed_phase(timings, "write"):
        if request.mode is OutputMode.DOCUMENT:
            filename = document_filename(request.resolved_kind, request.subject, request.iso_date)
            paths = [write_document(
                encoded,
                request.output_dir / filename,
                page_width_mm=config.page_width_mm,
                page_height_mm=config.page_height_mm,
                title=f"{request.resolved_kind} {request.subject} {request.iso_date}",
            )]
        else:
            paths = write_sequence(
                encoded,
                request.output_dir,
                kind=request.resolved_kind,
                subject=request.subject,
                iso_date=request.iso_date,
            )

    return ExportResult(paths=tuple(paths), job=job, timings=timings)


def _render(node: Any, renderer: Renderer, options: RenderOptions) -> RasterBuffer:
    """Run the renderer; any error or an empty buffer is a RenderFailure."""
    try:
        buffer = renderer.render(node, options)
    except RenderFailure:
        raise
    except Exception as e:
        raise RenderFailure(f"Renderer {type(renderer).__name__} failed: {e}") from e

    if not isinstance(buffer, RasterBuffer) or buffer.is_empty:
        raise RenderFailure(f"Renderer {type(renderer).__name__} returned an empty buffer")

    logger.info(f"Rendered report: {buffer.width}x{buffer.height}px")
    return buffer


def _export_snapshot(
    buffer: RasterBuffer,
    request: ExportRequest,
    config: ExportConfig,
    timings: TimingLog,
) -> ExportResult:
    """Write the whole buffer as one image, without pagination."""
    page = Page(index=0, source_y_start=0, slice_height=buffer.height, top_margin_px=0)
    geometry = PageGeometry(
        page_width_px=buffer.width,
        page_height_px=buffer.height,
        margin_px=0,
    )
    job = ExportJob(pages=(page,), geometry=geometry, mode=OutputMode.SNAPSHOT)

    with timed_phase(timings, "encode"):
        data = encode_png(buffer.to_image(), compress_level=config.png_compress_level)

    filename = snapshot_filename(request.resolved_kind, request.subject, request.iso_date)
    with timed_phase(timings, "write"):
        path = write_snapshot(data, request.output_dir / filename)

    return ExportResult(paths=(path,), job=job, timings=timings)
