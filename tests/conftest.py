import pytest
import sys
from pathlib import Path

import numpy as np

# Add src to sys.path so we can import report_pager
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from report_pager.core.models import RasterBuffer


def build_buffer(width, height, *, ink_rows=(), blank_rows=(), ink=(0, 0, 0)):
    """
    Build a synthetic opaque buffer.

    Starts white, paints `ink_rows` ranges with `ink`, then repaints
    `blank_rows` ranges white. Ranges are (start, end) tuples.
    """
    pixels = np.full((height, width, 4), 255, dtype=np.uint8)
    for start, end in ink_rows:
        pixels[start:end, :, :3] = ink
    for start, end in blank_rows:
        pixels[start:end, :, :3] = 255
    return RasterBuffer(pixels)


# Common test fixtures
@pytest.fixture
def make_buffer():
    """Factory for synthetic RasterBuffers."""
    return build_buffer


@pytest.fixture
def ink_buffer():
    """1000x3000 buffer with content on every row (no whitespace at all)."""
    return build_buffer(1000, 3000, ink_rows=[(0, 3000)])


@pytest.fixture
def sample_image(tmp_path: Path):
    """Create a simple report image on disk: white with two text-like bands."""
    from PIL import Image, ImageDraw

    img = Image.new("RGB", (200, 600), color="white")
    draw = ImageDraw.Draw(img)
    draw.rectangle((10, 20, 190, 200), fill="black")
    draw.rectangle((10, 260, 190, 580), fill="black")
    img_path = tmp_path / "report.png"
    img.save(img_path)
    return img_path
