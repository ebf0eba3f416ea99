"""
Module: exporter.output

Purpose:
    Page rendering and output assembly. Composites page canvases,
    encodes them losslessly and writes either a multi-page PDF, a
    numbered PNG sequence or a single snapshot image.

Key Functions:
    - render_page(): Page canvas for a Page plan
    - encode_pages(): Render and encode all pages
    - write_document(): Multi-page PDF
    - write_sequence(): Numbered PNG files
    - write_snapshot(): Unsliced image

Dependencies:
    - reportlab: PDF generation
    - PIL: Image handling

Used By:
    - exporter.controller: Pipeline orchestration
"""

from .page_renderer import render_page
from .encoder import EncodedPage, encode_png, encode_pages
from .naming import (
    default_kind,
    document_filename,
    safe_component,
    sequence_filename,
    snapshot_filename,
)
from .sequence_writer import write_sequence, write_snapshot
from .pdf_writer import write_document

__all__ = [
    "render_page",
    "EncodedPage",
    "encode_png",
    "encode_pages",
    "default_kind",
    "document_filename",
    "safe_component",
    "sequence_filename",
    "snapshot_filename",
    "write_sequence",
    "write_snapshot",
    "write_document",
]
