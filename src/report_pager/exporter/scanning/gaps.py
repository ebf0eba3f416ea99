"""
Module: exporter.scanning.gaps

Purpose:
    Group blank rows into contiguous gaps and pick the cut point for a
    page boundary.

Key Functions:
    - find_gaps(): Contiguous blank runs in a row classification
    - select_gap(): Best gap (largest, later one wins ties)
    - find_cut(): Absolute cut coordinate for a scanned window

Algorithm:
    1. Collect maximal runs of blank rows
    2. No runs: keep the unmodified boundary (hard cut)
    3. Prefer gaps larger than `large_gap_px`; otherwise consider all
    4. Pick the largest; on equal size the later (lower) gap wins
    5. Cut at the gap midpoint, offset back to buffer coordinates

Dependencies:
    - numpy: Run detection
    - core.models: Gap

Used By:
    - exporter.layout.paginator: Non-final page cuts
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

import numpy as np

from report_pager.common.thresholds import PAGINATION_THRESHOLDS
from report_pager.core.models import Gap

logger = logging.getLogger(__name__)


def find_gaps(rows: np.ndarray) -> List[Gap]:
    """
    Find maximal runs of blank rows.

    Args:
        rows: Bool array, True for blank rows

    Returns:
        Gaps in top-to-bottom order, window-relative. A run touching
        the end of the window is closed at the window height.

    Example:
        >>> find_gaps(np.array([True, True, False, True]))
        [Gap(start=0, end=2), Gap(start=3, end=4)]
    """
    if rows.size == 0:
        return []

    # Edges of blank runs: +1 where a run starts, -1 one past where it ends
    padded = np.concatenate(([0], rows.astype(np.int8), [0]))
    edges = np.diff(padded)
    starts = np.flatnonzero(edges == 1)
    ends = np.flatnonzero(edges == -1)

    return [Gap(int(s), int(e)) for s, e in zip(starts, ends)]


def select_gap(
    gaps: Sequence[Gap],
    *,
    large_gap_px: int = PAGINATION_THRESHOLDS.large_gap_px,
) -> Optional[Gap]:
    """
    Select the gap to cut through.

    Gaps strictly larger than `large_gap_px` are considered first; if
    there are none, all gaps are. Among candidates the largest wins and
    on equal size the later one wins.

    Args:
        gaps: Gaps in top-to-bottom order
        large_gap_px: Size above which a gap counts as large

    Returns:
        Selected gap, or None if there are no gaps
    """
    if not gaps:
        return None

    large = [g for g in gaps if g.size > large_gap_px]
    candidates = large or list(gaps)

    best = candidates[0]
    for gap in candidates[1:]:
        if gap.size >= best.size:
            best = gap
    return best


def find_cut(
    rows: np.ndarray,
    offset: int,
    boundary: int,
    *,
    large_gap_px: int = PAGINATION_THRESHOLDS.large_gap_px,
) -> int:
    """
    Choose an absolute cut coordinate within a scanned window.

    Args:
        rows: Row classification for the window
        offset: Absolute y of the window's first row
        boundary: Naive page boundary, returned when no gap exists
        large_gap_px: Size above which a gap counts as large

    Returns:
        Absolute y to cut at

    Example:
        >>> rows = np.array([False] * 10 + [True] * 30 + [False] * 5)
        >>> find_cut(rows, offset=1000, boundary=1045)
        1025
    """
    gap = select_gap(find_gaps(rows), large_gap_px=large_gap_px)
    if gap is None:
        return boundary

    cut = offset + gap.midpoint
    logger.debug(f"Cut at {cut} (gap {gap.start}-{gap.end} in window at {offset})")
    return cut
