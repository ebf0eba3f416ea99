"""
Module: exporter.scanning.whitespace

Purpose:
    Classify pixel rows of a RasterBuffer as blank or non-blank inside a
    bounded vertical window.

Key Functions:
    - scan_rows(): Row classification for a ScanWindow

Algorithm:
    A row is blank iff every sampled pixel (every `stride`-th column,
    starting at column 0) has R, G and B all >= `threshold`. Sampling
    keeps the cost sublinear in width for very tall, very wide buffers;
    a thin mark between two sampled columns can be missed.

Dependencies:
    - numpy: Vectorised comparison
    - core.models: RasterBuffer, ScanWindow

Used By:
    - exporter.layout.paginator: Lookback scan before each non-final cut
"""

from __future__ import annotations

import numpy as np

from report_pager.common.thresholds import PAGINATION_THRESHOLDS
from report_pager.core.models import RasterBuffer, ScanWindow
from report_pager.exporter.errors import ScanFailure


def scan_rows(
    buffer: RasterBuffer,
    window: ScanWindow,
    *,
    stride: int = PAGINATION_THRESHOLDS.sample_stride,
    threshold: int = PAGINATION_THRESHOLDS.whiteness_threshold,
) -> np.ndarray:
    """
    Classify each row in a window as blank (True) or not (False).

    Args:
        buffer: Source raster
        window: Rows [y0, y1) to classify
        stride: Column sampling stride (>= 1)
        threshold: Minimum channel value for a white pixel

    Returns:
        Bool array with one entry per window row. Empty when the window
        height is <= 0, meaning no information.

    Raises:
        ScanFailure: If the rows cannot be read

    Example:
        >>> rows = scan_rows(buffer, ScanWindow(900, 1000))
        >>> rows.shape
        (100,)
    """
    if window.height <= 0:
        return np.zeros(0, dtype=bool)

    try:
        rows = buffer.rows(window.y0, window.y1)
        sampled = rows[:, ::stride, :3]
    except (IndexError, ValueError, TypeError) as e:
        raise ScanFailure(f"Cannot read rows [{window.y0}, {window.y1}): {e}") from e

    return np.all(sampled >= threshold, axis=(1, 2))
