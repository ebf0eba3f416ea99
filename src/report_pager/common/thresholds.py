"""Centralized threshold and magic number configuration.

This module contains the empirically tuned thresholds used when scanning
rasterized reports for whitespace and choosing page cuts. Having these in one
place makes tuning easier; ``ExportConfig`` takes its defaults from here.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PaginationThresholds:
    """Thresholds for whitespace scanning and cut selection."""

    # Whitespace scanning
    whiteness_threshold: int = 250  # Min R, G and B value for a "white" pixel
    sample_stride: int = 10  # Check every Nth column of a row

    # Gap selection
    large_gap_px: int = 20  # Gaps strictly larger than this are preferred

    # Lookback window above the naive page boundary
    lookback_fraction: float = 0.3  # Fraction of the page content height
    lookback_cap_px: int = 2000  # Absolute cap on the lookback window


@dataclass(frozen=True)
class PageFormatDefaults:
    """Physical page format and rasterization defaults."""

    page_width_mm: float = 210.0  # A4
    page_height_mm: float = 297.0  # A4
    margin_mm: float = 15.0
    pixel_density: float = 4.0  # Render scale factor
    settle_delay_s: float = 0.8  # Wait for late glyphs/icons before rendering
    background_color: tuple[int, int, int] = (255, 255, 255)


# Global instances for easy import
PAGINATION_THRESHOLDS = PaginationThresholds()
PAGE_FORMAT_DEFAULTS = PageFormatDefaults()
