"""
Module: raster

Purpose:
    Provides the RasterBuffer dataclass - the rendered report as an
    immutable RGBA pixel grid - and ScanWindow, a vertical row range
    within a buffer.

Key Functions:
    - RasterBuffer.from_image(image): Wrap a PIL image
    - RasterBuffer.to_image(): Convert back to a PIL image
    - RasterBuffer.rows(y0, y1): Read-only view of a row range
    - ScanWindow.ending_at(boundary, size): Lookback window above a boundary

Dependencies:
    - numpy: Pixel storage
    - PIL.Image: Image conversion

Used By:
    - exporter.rendering.provider: Produces RasterBuffers
    - exporter.scanning.whitespace: Reads pixel rows
    - exporter.output.page_renderer: Composites page canvases
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from PIL import Image


@dataclass(frozen=True, slots=True, eq=False)
class RasterBuffer:
    """
    Immutable RGBA pixel grid.

    Produced once per export by a renderer and read-only thereafter.
    The backing array has shape (height, width, 4) and dtype uint8;
    it is flagged non-writeable on construction.

    Attributes:
        pixels: RGBA array of shape (height, width, 4)

    Example:
        >>> buffer = RasterBuffer.from_image(Image.new("RGB", (100, 50), "white"))
        >>> buffer.width, buffer.height
        (100, 50)
    """

    pixels: np.ndarray

    def __post_init__(self) -> None:
        """Validate shape and freeze the backing array."""
        if self.pixels.ndim != 3 or self.pixels.shape[2] != 4:
            raise ValueError(
                f"pixels must have shape (height, width, 4): {self.pixels.shape}"
            )
        if self.pixels.dtype != np.uint8:
            raise ValueError(f"pixels must be uint8: {self.pixels.dtype}")
        self.pixels.setflags(write=False)

    @classmethod
    def from_image(cls, image: Image.Image) -> "RasterBuffer":
        """Create a buffer from a PIL image (converted to RGBA)."""
        if image.mode != "RGBA":
            image = image.convert("RGBA")
        return cls(np.array(image, dtype=np.uint8))

    @classmethod
    def blank(
        cls,
        width: int,
        height: int,
        color: tuple[int, int, int] = (255, 255, 255),
    ) -> "RasterBuffer":
        """Create an opaque buffer filled with a single colour."""
        pixels = np.empty((height, width, 4), dtype=np.uint8)
        pixels[:, :, :3] = color
        pixels[:, :, 3] = 255
        return cls(pixels)

    @property
    def width(self) -> int:
        """Width in pixels."""
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        """Height in pixels."""
        return int(self.pixels.shape[0])

    @property
    def is_empty(self) -> bool:
        """True if the buffer has no pixels."""
        return self.width == 0 or self.height == 0

    def rows(self, y0: int, y1: int) -> np.ndarray:
        """
        Get a read-only view of rows [y0, y1).

        Raises:
            IndexError: If the range falls outside the buffer
        """
        if y0 < 0 or y1 > self.height or y1 < y0:
            raise IndexError(f"Row range [{y0}, {y1}) outside buffer height {self.height}")
        return self.pixels[y0:y1]

    def to_image(self) -> Image.Image:
        """Convert to a PIL RGBA image (copies the pixels)."""
        return Image.fromarray(self.pixels.copy())


@dataclass(frozen=True, slots=True)
class ScanWindow:
    """
    Vertical pixel range [y0, y1) within a RasterBuffer.

    A window with height <= 0 carries no rows; scanning it yields
    no information.

    Example:
        >>> ScanWindow.ending_at(1343, 402)
        ScanWindow(y0=941, y1=1343)
    """

    y0: int
    y1: int

    @classmethod
    def ending_at(cls, boundary: int, size: int) -> "ScanWindow":
        """Window of up to `size` rows ending at `boundary` (clamped at 0)."""
        return cls(max(0, boundary - size), boundary)

    @property
    def height(self) -> int:
        """Number of rows in the window."""
        return self.y1 - self.y0
