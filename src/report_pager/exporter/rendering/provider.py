"""
Module: exporter.rendering.provider

Purpose:
    Renderer boundary. A renderer turns a report handle ("node") into
    a single tall RasterBuffer; the pagination core only ever sees the
    buffer, so it can be tested with synthetic images.

Key Classes:
    - RenderOptions: Pixel density, background colour, exclusion predicate
    - Renderer: Abstract renderer interface
    - ImageRenderer: Report already rasterized to an image file/PIL image
    - PdfRenderer: Report saved as PDF, pages stitched into one buffer

Key Functions:
    - exclude_non_printable(): Default annotation exclusion predicate
    - include_all(): Predicate that excludes nothing

Dependencies:
    - fitz (PyMuPDF): PDF rasterization
    - PIL: Image loading, scaling and stitching

Used By:
    - exporter.controller: Step 1 of every export
    - cli: Picks a renderer from the input file type
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, List, Union

import fitz
from PIL import Image

from report_pager.common.thresholds import PAGE_FORMAT_DEFAULTS
from report_pager.core.models import RasterBuffer
from report_pager.exporter.errors import RenderFailure

logger = logging.getLogger(__name__)

# Annotation types that embed media or files rather than printable marks
EMBED_ANNOT_TYPES = frozenset({"FileAttachment", "Sound", "Movie", "Screen", "RichMedia"})


def exclude_non_printable(annot: Any) -> bool:
    """
    Default exclusion predicate for PDF annotations.

    Excludes embed-like annotations and any annotation not flagged
    for printing.
    """
    type_name = annot.type[1] if annot.type else ""
    if type_name in EMBED_ANNOT_TYPES:
        return True
    return not (annot.flags & fitz.PDF_ANNOT_IS_PRINT)


def include_all(_: Any) -> bool:
    """Exclusion predicate that keeps every element."""
    return False


@dataclass(frozen=True)
class RenderOptions:
    """
    Options passed to a renderer.

    Attributes:
        pixel_density: Scale factor (1.0 = native resolution; 72 dpi for PDF)
        background_color: RGB used to flatten transparency
        exclude: Predicate returning True for elements to leave out
    """

    pixel_density: float = PAGE_FORMAT_DEFAULTS.pixel_density
    background_color: tuple[int, int, int] = PAGE_FORMAT_DEFAULTS.background_color
    exclude: Callable[[Any], bool] = field(default=exclude_non_printable)


class Renderer(ABC):
    """
    Abstract interface for rasterizing a report.

    Implementations raise RenderFailure on any error; returning an
    empty buffer is also treated as a failure by the controller.
    """

    @abstractmethod
    def render(self, node: Any, options: RenderOptions) -> RasterBuffer:
        """
        Rasterize a report.

        Args:
            node: Renderer-specific report handle
            options: Render options

        Returns:
            RasterBuffer of the whole report

        Raises:
            RenderFailure: If the report cannot be rendered
        """


class ImageRenderer(Renderer):
    """
    Renderer for reports that are already images.

    The node is a path or a PIL image, flattened onto the background
    colour. An image is already rasterized, so by default it is used at
    its native resolution and `options.pixel_density` is ignored;
    resampling adds no detail. Pass `scale_to_density=True` to resize
    it by the density anyway. There are no elements to exclude, so
    `options.exclude` is not consulted.

    Example:
        >>> buffer = ImageRenderer().render(Path("report.png"), RenderOptions())
    """

    def __init__(self, scale_to_density: bool = False) -> None:
        self.scale_to_density = scale_to_density

    def render(self, node: Union[str, Path, Image.Image], options: RenderOptions) -> RasterBuffer:
        try:
            if isinstance(node, Image.Image):
                image = node.convert("RGBA")
            else:
                with Image.open(node) as opened:
                    image = opened.convert("RGBA")
        except (OSError, ValueError) as e:
            raise RenderFailure(f"Cannot load report image {node!r}: {e}") from e

        if self.scale_to_density and options.pixel_density != 1:
            size = (
                max(1, round(image.width * options.pixel_density)),
                max(1, round(image.height * options.pixel_density)),
            )
            image = image.resize(size, Image.Resampling.LANCZOS)

        flattened = Image.new("RGBA", image.size, (*options.background_color, 255))
        flattened.alpha_composite(image)

        logger.info(f"Rendered image report at {flattened.width}x{flattened.height}px")
        return RasterBuffer.from_image(flattened)


class PdfRenderer(Renderer):
    """
    Renderer for reports saved as PDF.

    Each page is rasterized at 72 * pixel_density dpi and the pages are
    stitched top to bottom into one buffer, as wide as the widest page.
    Annotations matching `options.exclude` are hidden before rendering;
    the source file is never modified.

    Example:
        >>> buffer = PdfRenderer().render(Path("report.pdf"), RenderOptions(pixel_density=2))
    """

    def render(self, node: Union[str, Path], options: RenderOptions) -> RasterBuffer:
        try:
            doc = fitz.open(str(node))
        except (RuntimeError, OSError, ValueError) as e:
            raise RenderFailure(f"Cannot open report PDF {node!r}: {e}") from e

        try:
            if doc.page_count == 0:
                raise RenderFailure(f"Report PDF has no pages: {node!r}")
            segments = [self._render_page(page, options) for page in doc]
        except (RuntimeError, ValueError) as e:
            raise RenderFailure(f"Cannot render report PDF {node!r}: {e}") from e
        finally:
            doc.close()

        composite = _stitch(segments, options.background_color)
        logger.info(
            f"Rendered {len(segments)} PDF pages into {composite.width}x{composite.height}px"
        )
        return RasterBuffer.from_image(composite)

    def _render_page(self, page: fitz.Page, options: RenderOptions) -> Image.Image:
        hidden = 0
        for annot in page.annots():
            if options.exclude(annot):
                annot.set_flags(annot.flags | fitz.PDF_ANNOT_IS_HIDDEN)
                hidden += 1
        if hidden:
            logger.debug(f"Hid {hidden} annotations on page {page.number}")

        matrix = fitz.Matrix(options.pixel_density, options.pixel_density)
        pix = page.get_pixmap(matrix=matrix, alpha=False)
        return Image.frombytes("RGB", (pix.width, pix.height), pix.samples)


def _stitch(segments: List[Image.Image], background: tuple[int, int, int]) -> Image.Image:
    """Vertically concatenate images onto a background-filled canvas."""
    total_height = sum(s.height for s in segments)
    max_width = max(s.width for s in segments)

    composite = Image.new("RGB", (max_width, total_height), background)
    y_offset = 0
    for segment in segments:
        composite.paste(segment, (0, y_offset))
        y_offset += segment.height
    return composite
