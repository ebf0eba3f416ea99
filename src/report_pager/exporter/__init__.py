"""
Module: exporter

Purpose:
    Content-aware export of tall rendered reports into fixed-size pages.
    Renders a report to one pixel buffer, scans it for whitespace bands,
    cuts pages inside those bands and writes a multi-page PDF, a numbered
    PNG sequence or a single snapshot image.

Key Functions:
    - export_report(): Main entry point for an export
    - paginate(): Plan page slices over a buffer
    - load_config(): Load ExportConfig from JSON

Key Classes:
    - ExportConfig: Configuration for exporting
    - ExportRequest / ExportResult: Controller input and output
    - Renderer, ImageRenderer, PdfRenderer: Renderer boundary
    - ExportGuard: One export at a time

Dependencies:
    - numpy: Whitespace scanning
    - PIL: Page compositing and PNG encoding
    - reportlab: PDF assembly
    - fitz (PyMuPDF): PDF rasterization
    - portalocker: Cross-process export lock

Used By:
    - report_pager.cli: Command line interface
"""

from .config import ExportConfig, load_config
from .errors import (
    EncodingFailure,
    ExportBusyError,
    ExportError,
    ExportFailure,
    RenderFailure,
    ScanFailure,
)
from .guard import ExportGuard
from .layout import compute_geometry, paginate
from .rendering import ImageRenderer, PdfRenderer, Renderer, RenderOptions
from .controller import export_report, ExportRequest, ExportResult

__all__ = [
    # Config
    "ExportConfig",
    "load_config",
    # Errors
    "ExportFailure",
    "RenderFailure",
    "ScanFailure",
    "EncodingFailure",
    "ExportError",
    "ExportBusyError",
    # Pipeline
    "ExportGuard",
    "compute_geometry",
    "paginate",
    # Rendering
    "Renderer",
    "RenderOptions",
    "ImageRenderer",
    "PdfRenderer",
    # Controller
    "export_report",
    "ExportRequest",
    "ExportResult",
]
