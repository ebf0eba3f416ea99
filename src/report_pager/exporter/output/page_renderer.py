"""
Module: exporter.output.page_renderer

Purpose:
    Composite one planned page slice onto a fixed-size page canvas.

Key Functions:
    - render_page(): Page canvas for a Page plan

Dependencies:
    - PIL: Canvas creation and compositing
    - core.models: RasterBuffer, Page, PageGeometry

Used By:
    - exporter.output.encoder: Renders pages before encoding
"""

from __future__ import annotations

from PIL import Image

from report_pager.core.models import Page, PageGeometry, RasterBuffer


def render_page(
    page: Page,
    source: RasterBuffer,
    geometry: PageGeometry,
    *,
    background: tuple[int, int, int] = (255, 255, 255),
) -> RasterBuffer:
    """
    Render a page canvas.

    Every canvas is exactly page_width_px x page_height_px regardless of
    how much content the page carries, so assembled documents are
    uniform. The slice is composited at (0, top_margin_px).

    Args:
        page: Page plan
        source: Full rendered report
        geometry: Page geometry
        background: Canvas fill colour

    Returns:
        New RasterBuffer for the page

    Raises:
        ValueError: If the slice lies outside the source or overflows the page

    Example:
        >>> canvas = render_page(pages[1], buffer, geometry)
        >>> (canvas.width, canvas.height)
        (1000, 1414)
    """
    if page.source_y_end > source.height:
        raise ValueError(
            f"Page {page.index} slice ends at {page.source_y_end}, "
            f"beyond source height {source.height}"
        )
    if page.top_margin_px + page.slice_height > geometry.page_height_px:
        raise ValueError(
            f"Page {page.index} slice of {page.slice_height}px at offset "
            f"{page.top_margin_px} overflows page height {geometry.page_height_px}"
        )

    canvas = Image.new(
        "RGBA",
        (geometry.page_width_px, geometry.page_height_px),
        (*background, 255),
    )
    slice_img = Image.fromarray(source.rows(page.source_y_start, page.source_y_end).copy())
    canvas.alpha_composite(slice_img, dest=(0, page.top_margin_px))

    return RasterBuffer.from_image(canvas)
