"""
Tests for exporter.layout.geometry
"""

import pytest

from report_pager.core.models import PageGeometry
from report_pager.exporter.layout import compute_geometry, mm_to_pt


def test_a4_geometry_for_1000px_width():
    geometry = compute_geometry(1000, page_width_mm=210, page_height_mm=297, margin_mm=15)

    assert geometry == PageGeometry(page_width_px=1000, page_height_px=1414, margin_px=71)


def test_geometry_rounds_down():
    geometry = compute_geometry(100, page_width_mm=210, page_height_mm=297, margin_mm=15)

    assert geometry.page_height_px == 141  # 141.43
    assert geometry.margin_px == 7  # 7.12


def test_zero_margin():
    geometry = compute_geometry(500, page_width_mm=210, page_height_mm=297, margin_mm=0)

    assert geometry.margin_px == 0
    assert geometry.content_height(3) == geometry.page_height_px


def test_landscape_page():
    geometry = compute_geometry(1000, page_width_mm=200, page_height_mm=100, margin_mm=25)

    assert geometry.page_height_px == 500
    assert geometry.margin_px == 125


def test_zero_width_is_invalid():
    with pytest.raises(ValueError):
        compute_geometry(0, page_width_mm=210, page_height_mm=297, margin_mm=15)


def test_mm_to_pt():
    assert mm_to_pt(25.4) == pytest.approx(72.0)
    assert mm_to_pt(210) == pytest.approx(595.276, abs=0.01)
