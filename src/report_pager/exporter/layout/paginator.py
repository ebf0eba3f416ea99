"""
Module: exporter.layout.paginator

Purpose:
    Plan page slices over a tall rendered report so that page breaks
    fall inside whitespace instead of through content.

Key Functions:
    - paginate(): Main pagination function

Algorithm:
    Single pass from the top of the buffer:
    1. Content budget = page height - top margin - bottom margin
       (page 0 has no top margin)
    2. Final page: take whatever remains
    3. Otherwise scan a lookback window above the naive boundary
       (min(fraction * budget, cap) rows) and move the cut into the
       best whitespace gap; no gap means a hard cut at the boundary
    4. Every slice is at least 1px, so the loop always terminates

Dependencies:
    - exporter.scanning: Row classification and cut selection
    - core.models: RasterBuffer, PageGeometry, Page

Used By:
    - exporter.controller: Main export controller
"""

from __future__ import annotations

import logging
import math
from typing import List

from report_pager.core.models import Page, PageGeometry, RasterBuffer, ScanWindow
from report_pager.exporter.config import ExportConfig
from report_pager.exporter.errors import ScanFailure
from report_pager.exporter.scanning import find_cut, scan_rows

logger = logging.getLogger(__name__)


def paginate(
    buffer: RasterBuffer,
    geometry: PageGeometry,
    config: ExportConfig,
) -> tuple[Page, ...]:
    """
    Split a buffer into page slices.

    Args:
        buffer: Rendered report
        geometry: Page geometry for the buffer width
        config: Scan thresholds and lookback settings

    Returns:
        Pages in order; slice heights sum to the buffer height.
        An empty buffer yields no pages.

    Example:
        >>> pages = paginate(buffer, geometry, ExportConfig())
        >>> sum(p.slice_height for p in pages) == buffer.height
        True
    """
    total_height = buffer.height
    pages: List[Page] = []

    current_y = 0
    page_index = 0

    while current_y < total_height:
        top_margin = geometry.top_margin(page_index)
        max_content = geometry.content_height(page_index)
        remaining = total_height - current_y
        slice_height = min(max_content, remaining)

        if slice_height < remaining:
            boundary = current_y + slice_height
            cut_y = _find_cut_above(buffer, boundary, max_content, config)
            slice_height = max(1, cut_y - current_y)

        pages.append(Page(
            index=page_index,
            source_y_start=current_y,
            slice_height=slice_height,
            top_margin_px=top_margin,
        ))
        logger.debug(
            f"Page {page_index}: rows {current_y}-{current_y + slice_height} "
            f"(budget {max_content}px)"
        )

        current_y += slice_height
        page_index += 1

    logger.info(f"Paginated {total_height}px onto {len(pages)} pages")
    return tuple(pages)


def _find_cut_above(
    buffer: RasterBuffer,
    boundary: int,
    max_content: int,
    config: ExportConfig,
) -> int:
    """
    Scan the lookback window ending at `boundary` and return the cut.

    A scan failure is logged and falls back to the hard cut.
    """
    scan_range = min(math.floor(max_content * config.lookback_fraction), config.lookback_cap_px)
    window = ScanWindow.ending_at(boundary, scan_range)

    try:
        rows = scan_rows(
            buffer,
            window,
            stride=config.sample_stride,
            threshold=config.whiteness_threshold,
        )
    except ScanFailure as e:
        logger.warning(f"Whitespace scan failed, falling back to hard cut at {boundary}: {e}")
        return boundary

    return find_cut(rows, window.y0, boundary, large_gap_px=config.large_gap_px)
