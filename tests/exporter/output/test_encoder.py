"""
Tests for exporter.output.encoder
"""

import io
from unittest.mock import patch

import pytest
from PIL import Image

from report_pager.core.models import Page, PageGeometry
from report_pager.exporter.errors import EncodingFailure
from report_pager.exporter.output import encode_pages, encode_png, render_page


@pytest.fixture
def geometry():
    return PageGeometry(page_width_px=40, page_height_px=60, margin_px=5)


@pytest.fixture
def pages():
    return (
        Page(index=0, source_y_start=0, slice_height=55, top_margin_px=0),
        Page(index=1, source_y_start=55, slice_height=50, top_margin_px=5),
        Page(index=2, source_y_start=105, slice_height=15, top_margin_px=5),
    )


@pytest.fixture
def source(make_buffer):
    return make_buffer(40, 120, ink_rows=[(10, 30), (70, 90)])


def _decode(data):
    return Image.open(io.BytesIO(data))


def test_encode_png_is_lossless():
    image = Image.new("RGB", (8, 8), (12, 34, 56))

    decoded = _decode(encode_png(image))

    assert decoded.format == "PNG"
    assert decoded.convert("RGB").getpixel((3, 3)) == (12, 34, 56)


def test_encode_png_drops_alpha():
    image = Image.new("RGBA", (4, 4), (0, 0, 0, 255))

    assert _decode(encode_png(image)).mode == "RGB"


def test_pages_keep_order(pages, source, geometry):
    encoded = encode_pages(pages, source, geometry, max_workers=3)

    assert [e.page.index for e in encoded] == [0, 1, 2]


def test_every_page_has_page_dimensions(pages, source, geometry):
    encoded = encode_pages(pages, source, geometry)

    for item in encoded:
        assert _decode(item.data).size == (40, 60)


def test_encoded_content_matches_rendered_page(pages, source, geometry):
    encoded = encode_pages(pages, source, geometry, max_workers=1)

    expected = render_page(pages[1], source, geometry).to_image().convert("RGB")
    actual = _decode(encoded[1].data).convert("RGB")
    assert list(actual.getdata()) == list(expected.getdata())


def test_single_worker(pages, source, geometry):
    assert len(encode_pages(pages, source, geometry, max_workers=1)) == 3


def test_no_pages(source, geometry):
    assert encode_pages((), source, geometry) == []


def test_render_error_becomes_encoding_failure(pages, source, geometry):
    with patch(
        "report_pager.exporter.output.encoder.render_page",
        side_effect=ValueError("slice overflows page"),
    ):
        with pytest.raises(EncodingFailure, match="Page 0"):
            encode_pages(pages, source, geometry)


def test_encode_error_propagates(pages, source, geometry):
    with patch(
        "report_pager.exporter.output.encoder.encode_png",
        side_effect=EncodingFailure("disk full"),
    ):
        with pytest.raises(EncodingFailure, match="disk full"):
            encode_pages(pages, source, geometry)
