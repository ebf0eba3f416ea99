"""Common constants shared across the pager."""

from __future__ import annotations

from .thresholds import (
    PaginationThresholds,
    PageFormatDefaults,
    PAGINATION_THRESHOLDS,
    PAGE_FORMAT_DEFAULTS,
)

__all__ = [
    "PaginationThresholds",
    "PageFormatDefaults",
    "PAGINATION_THRESHOLDS",
    "PAGE_FORMAT_DEFAULTS",
]
