"""
Tests for exporter.scanning.whitespace

Test Coverage:
- scan_rows(): blank/non-blank classification
- Column stride sampling and whiteness threshold
- Empty windows and unreadable rows
"""

import numpy as np
import pytest

from report_pager.core.models import RasterBuffer, ScanWindow
from report_pager.exporter.errors import ScanFailure
from report_pager.exporter.scanning import scan_rows


def test_classifies_rows(make_buffer):
    buffer = make_buffer(100, 50, ink_rows=[(10, 20), (30, 31)])

    rows = scan_rows(buffer, ScanWindow(0, 50))

    assert rows.shape == (50,)
    assert rows.dtype == bool
    assert not rows[10:20].any()
    assert not rows[30]
    assert rows[:10].all()
    assert rows[20:30].all()
    assert rows[31:].all()


def test_window_is_relative(make_buffer):
    buffer = make_buffer(100, 50, ink_rows=[(40, 45)])

    rows = scan_rows(buffer, ScanWindow(35, 50))

    assert rows.tolist() == [True] * 5 + [False] * 5 + [True] * 5


def test_empty_window_returns_no_information(make_buffer):
    buffer = make_buffer(100, 50)

    assert scan_rows(buffer, ScanWindow(20, 20)).size == 0
    assert scan_rows(buffer, ScanWindow(30, 20)).size == 0


def test_unsampled_columns_are_ignored():
    pixels = np.full((3, 100, 4), 255, dtype=np.uint8)
    pixels[0, 5, :3] = 0  # between sampled columns 0 and 10
    pixels[1, 10, :3] = 0  # on a sampled column

    rows = scan_rows(RasterBuffer(pixels), ScanWindow(0, 3), stride=10)

    assert rows.tolist() == [True, False, True]


def test_stride_one_checks_every_column():
    pixels = np.full((1, 100, 4), 255, dtype=np.uint8)
    pixels[0, 5, :3] = 0

    rows = scan_rows(RasterBuffer(pixels), ScanWindow(0, 1), stride=1)

    assert rows.tolist() == [False]


@pytest.mark.parametrize("channel", [0, 1, 2])
def test_any_channel_below_threshold_is_ink(channel):
    pixels = np.full((2, 10, 4), 255, dtype=np.uint8)
    pixels[0, 0, channel] = 249
    pixels[1, 0, channel] = 250

    rows = scan_rows(RasterBuffer(pixels), ScanWindow(0, 2), threshold=250)

    assert rows.tolist() == [False, True]


def test_alpha_channel_is_ignored():
    pixels = np.full((1, 10, 4), 255, dtype=np.uint8)
    pixels[0, :, 3] = 0

    assert scan_rows(RasterBuffer(pixels), ScanWindow(0, 1)).tolist() == [True]


def test_window_outside_buffer_raises_scan_failure(make_buffer):
    buffer = make_buffer(10, 50)

    with pytest.raises(ScanFailure):
        scan_rows(buffer, ScanWindow(40, 80))
