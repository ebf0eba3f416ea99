"""
Module: exporter.layout.geometry

Purpose:
    Derive pixel page geometry from a physical page format and the
    rendered buffer's width.

Key Functions:
    - compute_geometry(): PageGeometry for a buffer width

Dependencies:
    - math (std)
    - core.models: PageGeometry

Used By:
    - exporter.controller: Once per export
    - exporter.output.pdf_writer: Physical size lookup
"""

from __future__ import annotations

import math

from report_pager.core.models import PageGeometry

MM_PER_INCH = 25.4
POINTS_PER_INCH = 72.0


def compute_geometry(
    buffer_width_px: int,
    *,
    page_width_mm: float,
    page_height_mm: float,
    margin_mm: float,
) -> PageGeometry:
    """
    Compute page geometry for a buffer width.

    The page is as wide as the buffer; the height keeps the physical
    aspect ratio and the margin scales with the height. Both round down.

    Args:
        buffer_width_px: Width of the rendered report
        page_width_mm: Physical page width
        page_height_mm: Physical page height
        margin_mm: Physical top/bottom margin

    Returns:
        PageGeometry for the buffer

    Raises:
        ValueError: If the resulting page has no content height

    Example:
        >>> compute_geometry(1000, page_width_mm=210, page_height_mm=297, margin_mm=15)
        PageGeometry(page_width_px=1000, page_height_px=1414, margin_px=71)
    """
    page_height_px = math.floor(buffer_width_px * (page_height_mm / page_width_mm))
    margin_px = math.floor(page_height_px * (margin_mm / page_height_mm))
    return PageGeometry(
        page_width_px=buffer_width_px,
        page_height_px=page_height_px,
        margin_px=margin_px,
    )


def mm_to_pt(mm: float) -> float:
    """Convert millimetres to PDF points (1/72 inch)."""
    return mm / MM_PER_INCH * POINTS_PER_INCH
