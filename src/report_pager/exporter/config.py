"""
Module: exporter.config

Purpose:
    Configuration for the export pipeline. Immutable configuration with
    validation on construction, plus loading from a JSON settings file.

Key Classes:
    - ExportConfig: Main configuration for exporting a report

Key Functions:
    - load_config(): Load ExportConfig from a JSON file with fallback to defaults

Dependencies:
    - dataclasses (std)
    - json (std)
    - common.thresholds: Default values

Used By:
    - exporter.controller: Main export controller
    - exporter.layout.paginator: Scan and lookback settings
    - cli: Command line overrides
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional

from report_pager.common.thresholds import PAGE_FORMAT_DEFAULTS, PAGINATION_THRESHOLDS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExportConfig:
    """
    Configuration for exporting a report (immutable).

    Attributes:
        page_width_mm: Physical page width
        page_height_mm: Physical page height
        margin_mm: Top/bottom margin (the first page has no top margin)
        pixel_density: Render scale factor passed to the renderer
        whiteness_threshold: Min R, G and B value for a white pixel (0-255)
        sample_stride: Column stride when classifying rows
        large_gap_px: Gaps strictly larger than this are preferred cut sites
        lookback_fraction: Lookback window as a fraction of page content height
        lookback_cap_px: Absolute cap on the lookback window
        settle_delay_s: Delay before rendering so late glyphs finish painting
        background_color: Page background RGB
        max_workers: Threads used to encode pages
        png_compress_level: zlib level for PNG output (lossless at any level)

    Example:
        >>> config = ExportConfig(margin_mm=10)
        >>> config.whiteness_threshold
        250
    """

    # Physical page
    page_width_mm: float = PAGE_FORMAT_DEFAULTS.page_width_mm
    page_height_mm: float = PAGE_FORMAT_DEFAULTS.page_height_mm
    margin_mm: float = PAGE_FORMAT_DEFAULTS.margin_mm

    # Rendering
    pixel_density: float = PAGE_FORMAT_DEFAULTS.pixel_density
    settle_delay_s: float = PAGE_FORMAT_DEFAULTS.settle_delay_s
    background_color: tuple[int, int, int] = PAGE_FORMAT_DEFAULTS.background_color

    # Scanning
    whiteness_threshold: int = PAGINATION_THRESHOLDS.whiteness_threshold
    sample_stride: int = PAGINATION_THRESHOLDS.sample_stride
    large_gap_px: int = PAGINATION_THRESHOLDS.large_gap_px
    lookback_fraction: float = PAGINATION_THRESHOLDS.lookback_fraction
    lookback_cap_px: int = PAGINATION_THRESHOLDS.lookback_cap_px

    # Output
    max_workers: int = 4
    png_compress_level: int = 6

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.page_width_mm <= 0 or self.page_height_mm <= 0:
            raise ValueError(
                f"Page size must be positive: {self.page_width_mm}x{self.page_height_mm}mm"
            )
        if self.margin_mm < 0:
            raise ValueError(f"margin_mm must be non-negative: {self.margin_mm}")
        if 2 * self.margin_mm >= self.page_height_mm:
            raise ValueError("Margins exceed page height")
        if self.pixel_density <= 0:
            raise ValueError(f"pixel_density must be positive: {self.pixel_density}")
        if self.settle_delay_s < 0:
            raise ValueError(f"settle_delay_s must be non-negative: {self.settle_delay_s}")
        if not 0 <= self.whiteness_threshold <= 255:
            raise ValueError(f"whiteness_threshold must be 0-255: {self.whiteness_threshold}")
        if self.sample_stride < 1:
            raise ValueError(f"sample_stride must be >= 1: {self.sample_stride}")
        if self.large_gap_px < 0:
            raise ValueError(f"large_gap_px must be non-negative: {self.large_gap_px}")
        if not 0 <= self.lookback_fraction <= 1:
            raise ValueError(f"lookback_fraction must be 0-1: {self.lookback_fraction}")
        if self.lookback_cap_px < 0:
            raise ValueError(f"lookback_cap_px must be non-negative: {self.lookback_cap_px}")
        if len(self.background_color) != 3 or not all(
            0 <= c <= 255 for c in self.background_color
        ):
            raise ValueError(f"background_color must be an RGB triple: {self.background_color}")
        if self.max_workers < 1:
            raise ValueError(f"max_workers must be >= 1: {self.max_workers}")
        if not 0 <= self.png_compress_level <= 9:
            raise ValueError(f"png_compress_level must be 0-9: {self.png_compress_level}")

    def with_overrides(self, **overrides: Any) -> "ExportConfig":
        """Copy with the given fields replaced; None values are ignored."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes) if changes else self

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ExportConfig":
        """
        Build a config from a settings mapping.

        Unknown keys are logged and ignored. Invalid values raise ValueError.
        """
        known = {f.name for f in fields(cls)}
        kwargs: Dict[str, Any] = {}
        for key, value in data.items():
            if key not in known:
                logger.warning(f"Ignoring unknown config key: {key!r}")
                continue
            if key == "background_color":
                value = tuple(value)
            kwargs[key] = value
        return cls(**kwargs)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a JSON-compatible dict."""
        data = {f.name: getattr(self, f.name) for f in fields(self)}
        data["background_color"] = list(self.background_color)
        return data


def load_config(path: Optional[Path]) -> ExportConfig:
    """
    Load configuration from a JSON settings file.

    Any malformed data falls back to defaults with a warning rather than
    failing the export.

    Args:
        path: Settings file, or None for defaults

    Returns:
        ExportConfig built from the file, or the default config

    Example:
        >>> config = load_config(Path("export_settings.json"))
    """
    if path is None:
        return ExportConfig()
    if not path.exists():
        logger.warning(f"Config file not found, using defaults: {path}")
        return ExportConfig()

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        logger.warning(f"Failed to read config {path}, using defaults: {e}")
        return ExportConfig()

    if not isinstance(data, dict):
        logger.warning(f"Config {path} is not a JSON object, using defaults")
        return ExportConfig()

    try:
        return ExportConfig.from_dict(data)
    except (TypeError, ValueError) as e:
        logger.warning(f"Invalid config {path}, using defaults: {e}")
        return ExportConfig()
