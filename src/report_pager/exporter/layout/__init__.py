"""
Module: exporter.layout

Purpose:
    Page geometry and content-aware pagination of rendered reports.

Key Functions:
    - compute_geometry(): Pixel page size for a buffer width
    - paginate(): Plan page slices

Dependencies:
    - exporter.scanning: Whitespace detection

Used By:
    - exporter.controller: Main export controller
"""

from .geometry import compute_geometry, mm_to_pt
from .paginator import paginate

__all__ = [
    "compute_geometry",
    "mm_to_pt",
    "paginate",
]
