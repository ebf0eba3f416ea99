"""
Module: exporter.rendering

Purpose:
    Renderer boundary: turns a report handle into a RasterBuffer.

Key Classes:
    - Renderer: Abstract interface
    - ImageRenderer: Image inputs
    - PdfRenderer: PDF inputs (PyMuPDF)
    - RenderOptions: Density, background, exclusion predicate

Dependencies:
    - fitz (PyMuPDF), PIL

Used By:
    - exporter.controller, cli
"""

from .provider import (
    Renderer,
    RenderOptions,
    ImageRenderer,
    PdfRenderer,
    exclude_non_printable,
    include_all,
)

__all__ = [
    "Renderer",
    "RenderOptions",
    "ImageRenderer",
    "PdfRenderer",
    "exclude_non_printable",
    "include_all",
]
