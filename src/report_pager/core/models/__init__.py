"""
Core Models Package

Immutable, validated data models shared by the scanning, pagination and
output stages. All models are frozen dataclasses, so pages can be handed
to worker threads for encoding without copying.
"""

from .raster import RasterBuffer, ScanWindow
from .pages import Gap, PageGeometry, Page, OutputMode, ExportJob

__all__ = [
    "RasterBuffer",
    "ScanWindow",
    "Gap",
    "PageGeometry",
    "Page",
    "OutputMode",
    "ExportJob",
]
