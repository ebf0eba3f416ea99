"""
Module: exporter.output.encoder

Purpose:
    Render planned pages and encode them to lossless PNG bytes.
    Pages have no data dependency on each other once their cuts are
    known, so they are rendered and encoded on a thread pool.

Key Classes:
    - EncodedPage: Page plan plus its PNG bytes

Key Functions:
    - encode_png(): Lossless PNG encoding of one image
    - encode_pages(): Render and encode all pages in order

Dependencies:
    - concurrent.futures: Thread pool execution
    - PIL.Image: PNG encoding
    - exporter.output.page_renderer: Page compositing

Used By:
    - exporter.controller: Before assembling output
"""

from __future__ import annotations

import io
import logging
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass
from typing import List, Sequence

from PIL import Image

from report_pager.core.models import Page, PageGeometry, RasterBuffer
from report_pager.exporter.errors import EncodingFailure

from .page_renderer import render_page

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EncodedPage:
    """
    A rendered page encoded as PNG.

    Attributes:
        page: Page plan the image was rendered from
        data: PNG bytes
    """

    page: Page
    data: bytes


def encode_png(image: Image.Image, *, compress_level: int = 6) -> bytes:
    """
    Encode an image as PNG, dropping the alpha channel.

    Raises:
        EncodingFailure: If Pillow cannot encode the image
    """
    buf = io.BytesIO()
    try:
        image.convert("RGB").save(buf, format="PNG", compress_level=compress_level)
    except (OSError, ValueError) as e:
        raise EncodingFailure(f"PNG encoding failed: {e}") from e
    return buf.getvalue()


def encode_pages(
    pages: Sequence[Page],
    source: RasterBuffer,
    geometry: PageGeometry,
    *,
    background: tuple[int, int, int] = (255, 255, 255),
    compress_level: int = 6,
    max_workers: int = 4,
) -> List[EncodedPage]:
    """
    Render and encode every page.

    Results keep page order. The first failure (in page order) is
    raised once all submitted work has finished; nothing is returned
    for a partially encoded job.

    Args:
        pages: Page plans in order
        source: Full rendered report
        geometry: Page geometry
        background: Page background colour
        compress_level: PNG zlib level
        max_workers: Maximum concurrent encoder threads

    Returns:
        EncodedPages in page order

    Raises:
        EncodingFailure: If any page cannot be rendered or encoded
    """
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures: List[Future] = [
            executor.submit(
                _render_and_encode, page, source, geometry, background, compress_level
            )
            for page in pages
        ]

    encoded = []
    for page, future in zip(pages, futures):
        try:
            encoded.append(future.result())
        except EncodingFailure:
            logger.error(f"Encoding failed for page {page.index}")
            raise
        except (OSError, ValueError) as e:
            logger.error(f"Rendering failed for page {page.index}: {e}")
            raise EncodingFailure(f"Page {page.index} could not be rendered: {e}") from e

    logger.info(f"Encoded {len(encoded)} pages")
    return encoded


def _render_and_encode(
    page: Page,
    source: RasterBuffer,
    geometry: PageGeometry,
    background: tuple[int, int, int],
    compress_level: int,
) -> EncodedPage:
    canvas = render_page(page, source, geometry, background=background)
    data = encode_png(canvas.to_image(), compress_level=compress_level)
    logger.debug(f"Encoded page {page.index}: {len(data)} bytes")
    return EncodedPage(page=page, data=data)
