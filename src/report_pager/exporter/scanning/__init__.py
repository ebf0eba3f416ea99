"""
Module: exporter.scanning

Purpose:
    Whitespace detection on rendered reports and content-aware cut
    selection.

Key Functions:
    - scan_rows(): Classify rows as blank/non-blank
    - find_gaps(): Group blank rows into gaps
    - select_gap(): Pick the best gap
    - find_cut(): Absolute cut coordinate

Dependencies:
    - numpy: Pixel comparison

Used By:
    - exporter.layout.paginator
"""

from .whitespace import scan_rows
from .gaps import find_gaps, select_gap, find_cut

__all__ = [
    "scan_rows",
    "find_gaps",
    "select_gap",
    "find_cut",
]
