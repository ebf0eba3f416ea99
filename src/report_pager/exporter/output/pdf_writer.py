"""
Module: exporter.output.pdf_writer

Purpose:
    Assemble encoded pages into one multi-page PDF using ReportLab.
    Each page image fills a physical page; images stay PNG so the
    document carries no lossy recompression.

Key Functions:
    - write_document(): Main document assembly function

Dependencies:
    - reportlab: PDF generation
    - exporter.layout.geometry: mm to pt conversion

Used By:
    - exporter.controller: Document mode
"""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Sequence

from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas

from report_pager.exporter.errors import EncodingFailure
from report_pager.exporter.layout.geometry import mm_to_pt

from .encoder import EncodedPage
from .sequence_writer import write_atomic

logger = logging.getLogger(__name__)


def write_document(
    encoded: Sequence[EncodedPage],
    output_path: Path,
    *,
    page_width_mm: float = 210.0,
    page_height_mm: float = 297.0,
    title: str = "",
) -> Path:
    """
    Write pages into a single PDF.

    The PDF is built in memory and moved into place only once complete.

    Args:
        encoded: Encoded pages in order
        output_path: Path to write the PDF
        page_width_mm: Physical page width
        page_height_mm: Physical page height
        title: Document title metadata

    Returns:
        Path to the written PDF

    Raises:
        EncodingFailure: If the PDF cannot be built or written

    Example:
        >>> write_document(encoded, Path("out/FullReport_Jane_Doe_2026-10-19.pdf"))
    """
    page_width_pt = mm_to_pt(page_width_mm)
    page_height_pt = mm_to_pt(page_height_mm)

    buf = io.BytesIO()
    try:
        c = canvas.Canvas(buf, pagesize=(page_width_pt, page_height_pt))
        if title:
            c.setTitle(title)
        for item in encoded:
            _draw_page(c, item, page_width_pt, page_height_pt)
            c.showPage()
        c.save()
    except Exception as e:
        logger.error(f"PDF assembly failed: {e}")
        raise EncodingFailure(f"Could not build PDF: {e}") from e

    try:
        write_atomic(output_path, buf.getvalue())
    except OSError as e:
        raise EncodingFailure(f"Could not write PDF {output_path}: {e}") from e

    logger.info(f"Rendered {len(encoded)} pages to {output_path}")
    return output_path


def _draw_page(
    c: canvas.Canvas,
    item: EncodedPage,
    page_width_pt: float,
    page_height_pt: float,
) -> None:
    """Draw one page image full-bleed from the bottom-left origin."""
    reader = ImageReader(io.BytesIO(item.data))
    c.drawImage(reader, 0, 0, width=page_width_pt, height=page_height_pt)
    logger.debug(f"Added page {item.page.index} to document")
