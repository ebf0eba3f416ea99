"""
Module: pages

Purpose:
    Page planning models: whitespace gaps, page geometry, per-page
    extraction plans and the export job that groups them.

Key Classes:
    - Gap: Contiguous run of blank rows inside a scan window
    - PageGeometry: Pixel page size and margin for a buffer width
    - Page: One page's slice of the source buffer
    - OutputMode: Document, sequence or snapshot output
    - ExportJob: Ordered pages plus output mode

Dependencies:
    - dataclasses (std)
    - enum (std)

Used By:
    - exporter.scanning.gaps: Creates Gaps
    - exporter.layout.paginator: Creates Pages
    - exporter.output: Renders and writes Pages
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True, slots=True)
class Gap:
    """
    Maximal contiguous run of blank rows, relative to its scan window.

    Attributes:
        start: First blank row (inclusive)
        end: Row after the last blank row (exclusive)

    Example:
        >>> Gap(10, 40).size
        30
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.end <= self.start:
            raise ValueError(f"end must be > start: {self.end} <= {self.start}")

    @property
    def size(self) -> int:
        """Number of blank rows."""
        return self.end - self.start

    @property
    def midpoint(self) -> int:
        """Row in the middle of the gap (rounded down)."""
        return self.start + self.size // 2


@dataclass(frozen=True, slots=True)
class PageGeometry:
    """
    Pixel dimensions of one physical page.

    Attributes:
        page_width_px: Page width (equal to the source buffer width)
        page_height_px: Page height preserving the physical aspect ratio
        margin_px: Top/bottom margin
    """

    page_width_px: int
    page_height_px: int
    margin_px: int

    def __post_init__(self) -> None:
        """Validate geometry on construction."""
        if self.page_width_px <= 0:
            raise ValueError(f"page_width_px must be positive: {self.page_width_px}")
        if self.margin_px < 0:
            raise ValueError(f"margin_px must be non-negative: {self.margin_px}")
        if self.page_height_px - 2 * self.margin_px < 1:
            raise ValueError(
                f"Margins leave no content height: page {self.page_height_px}px, "
                f"margin {self.margin_px}px"
            )

    def top_margin(self, page_index: int) -> int:
        """Top margin for a page; the first page has none."""
        return 0 if page_index == 0 else self.margin_px

    def content_height(self, page_index: int) -> int:
        """Maximum slice height that fits on a page."""
        return self.page_height_px - self.top_margin(page_index) - self.margin_px


@dataclass(frozen=True, slots=True)
class Page:
    """
    Extraction plan for a single page.

    Attributes:
        index: Page number (0-indexed)
        source_y_start: First source row on this page
        slice_height: Number of source rows on this page (>= 1)
        top_margin_px: Vertical offset of the slice on the page canvas
    """

    index: int
    source_y_start: int
    slice_height: int
    top_margin_px: int

    def __post_init__(self) -> None:
        if self.slice_height < 1:
            raise ValueError(f"slice_height must be >= 1: {self.slice_height}")

    @property
    def source_y_end(self) -> int:
        """Row after the last source row on this page (exclusive)."""
        return self.source_y_start + self.slice_height

    @property
    def number(self) -> int:
        """1-based page number used in file names."""
        return self.index + 1


class OutputMode(str, Enum):
    """How finished pages are delivered."""

    DOCUMENT = "document"  # One multi-page PDF
    SEQUENCE = "sequence"  # One PNG per page
    SNAPSHOT = "snapshot"  # One unsliced PNG of the whole report


@dataclass(frozen=True)
class ExportJob:
    """
    Ordered pages plus the output mode for one export.

    Attributes:
        pages: Pages in order
        geometry: Geometry the pages were planned for
        mode: Output mode
    """

    pages: tuple[Page, ...]
    geometry: PageGeometry
    mode: OutputMode

    @property
    def page_count(self) -> int:
        """Number of pages in the job."""
        return len(self.pages)

    @property
    def total_height(self) -> int:
        """Sum of all slice heights."""
        return sum(p.slice_height for p in self.pages)
