"""
Tests for exporter.output.page_renderer
"""

import numpy as np
import pytest

from report_pager.core.models import Page, PageGeometry, RasterBuffer
from report_pager.exporter.output import render_page

RED = (255, 0, 0)


@pytest.fixture
def geometry():
    return PageGeometry(page_width_px=10, page_height_px=50, margin_px=7)


@pytest.fixture
def source(make_buffer):
    return make_buffer(10, 60, ink_rows=[(20, 50)], ink=RED)


def test_canvas_has_full_page_size(source, geometry):
    page = Page(index=2, source_y_start=55, slice_height=5, top_margin_px=7)

    canvas = render_page(page, source, geometry)

    assert (canvas.width, canvas.height) == (10, 50)


def test_slice_is_placed_below_top_margin(source, geometry):
    page = Page(index=1, source_y_start=20, slice_height=30, top_margin_px=7)

    canvas = render_page(page, source, geometry)
    rgb = canvas.pixels[:, :, :3]

    assert np.all(rgb[0:7] == 255)
    assert np.all(rgb[7:37] == RED)
    assert np.all(rgb[37:50] == 255)


def test_first_page_starts_at_top(source, geometry):
    page = Page(index=0, source_y_start=20, slice_height=30, top_margin_px=0)

    canvas = render_page(page, source, geometry)

    assert np.all(canvas.pixels[0:30, :, :3] == RED)
    assert np.all(canvas.pixels[30:, :, :3] == 255)


def test_background_colour_fills_unused_area(source, geometry):
    page = Page(index=1, source_y_start=0, slice_height=10, top_margin_px=7)

    canvas = render_page(page, source, geometry, background=(0, 0, 255))

    assert tuple(canvas.pixels[0, 0, :3]) == (0, 0, 255)
    assert tuple(canvas.pixels[45, 0, :3]) == (0, 0, 255)
    assert tuple(canvas.pixels[10, 0, :3]) == (255, 255, 255)


def test_transparent_source_shows_background(geometry):
    pixels = np.zeros((20, 10, 4), dtype=np.uint8)
    source = RasterBuffer(pixels)
    page = Page(index=0, source_y_start=0, slice_height=20, top_margin_px=0)

    canvas = render_page(page, source, geometry, background=(10, 20, 30))

    assert tuple(canvas.pixels[5, 5]) == (10, 20, 30, 255)


def test_source_is_not_modified(source, geometry):
    before = source.pixels.copy()
    page = Page(index=1, source_y_start=20, slice_height=30, top_margin_px=7)

    render_page(page, source, geometry)

    assert np.array_equal(source.pixels, before)


def test_slice_overflowing_page_raises(source, geometry):
    page = Page(index=1, source_y_start=0, slice_height=44, top_margin_px=7)

    with pytest.raises(ValueError, match="overflows"):
        render_page(page, source, geometry)


def test_slice_beyond_source_raises(source, geometry):
    page = Page(index=1, source_y_start=40, slice_height=30, top_margin_px=7)

    with pytest.raises(ValueError, match="beyond source"):
        render_page(page, source, geometry)
