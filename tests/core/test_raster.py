"""
Tests for core.models.raster

Test Coverage:
- RasterBuffer: construction, immutability, PIL conversion, row access
- ScanWindow: lookback construction and clamping
"""

import numpy as np
import pytest
from PIL import Image

from report_pager.core.models import RasterBuffer, ScanWindow


class TestRasterBuffer:
    def test_from_image_converts_to_rgba(self):
        buffer = RasterBuffer.from_image(Image.new("RGB", (30, 20), "white"))

        assert buffer.width == 30
        assert buffer.height == 20
        assert buffer.pixels.shape == (20, 30, 4)
        assert buffer.pixels[0, 0].tolist() == [255, 255, 255, 255]

    def test_pixels_are_read_only(self):
        buffer = RasterBuffer.blank(10, 10)

        with pytest.raises(ValueError):
            buffer.pixels[0, 0, 0] = 0

    def test_rejects_wrong_shape(self):
        with pytest.raises(ValueError, match="shape"):
            RasterBuffer(np.zeros((10, 10, 3), dtype=np.uint8))

    def test_rejects_wrong_dtype(self):
        with pytest.raises(ValueError, match="uint8"):
            RasterBuffer(np.zeros((10, 10, 4), dtype=np.float32))

    def test_blank_fills_colour(self):
        buffer = RasterBuffer.blank(4, 3, color=(10, 20, 30))

        assert buffer.pixels[2, 3].tolist() == [10, 20, 30, 255]

    def test_empty_buffer(self):
        buffer = RasterBuffer(np.zeros((0, 100, 4), dtype=np.uint8))

        assert buffer.is_empty
        assert buffer.height == 0

    def test_rows_returns_range(self):
        buffer = RasterBuffer.blank(5, 50)

        assert buffer.rows(10, 25).shape == (15, 5, 4)

    def test_rows_outside_buffer_raises(self):
        buffer = RasterBuffer.blank(5, 50)

        with pytest.raises(IndexError):
            buffer.rows(40, 60)

    def test_to_image_round_trips_pixels(self):
        buffer = RasterBuffer.blank(8, 6, color=(1, 2, 3))

        image = buffer.to_image()

        assert image.mode == "RGBA"
        assert image.size == (8, 6)
        assert image.getpixel((0, 0)) == (1, 2, 3, 255)


class TestScanWindow:
    def test_ending_at(self):
        window = ScanWindow.ending_at(1343, 402)

        assert window == ScanWindow(941, 1343)
        assert window.height == 402

    def test_ending_at_clamps_to_zero(self):
        window = ScanWindow.ending_at(100, 300)

        assert window.y0 == 0
        assert window.height == 100

    def test_zero_size_window(self):
        assert ScanWindow.ending_at(100, 0).height == 0
