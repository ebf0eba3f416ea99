"""
Module: exporter.errors

Purpose:
    Exception taxonomy for the export pipeline.

Key Classes:
    - ExportFailure: Base class for internal pipeline failures
    - RenderFailure: Renderer raised or produced an empty/invalid buffer (fatal)
    - ScanFailure: Pixel access failed while scanning (recovered locally)
    - EncodingFailure: A page could not be encoded or written (fatal)
    - ExportError: The single user-facing error raised by the controller
    - ExportBusyError: Another export is already in flight

Used By:
    - exporter.controller: Wraps failures into ExportError
    - exporter.rendering, exporter.scanning, exporter.output
"""

from __future__ import annotations


USER_FAILURE_MESSAGE = "Report export failed. Please try again."


class ExportFailure(Exception):
    """Internal failure inside the export pipeline."""
    pass


class RenderFailure(ExportFailure):
    """Renderer failed or returned an empty buffer."""
    pass


class ScanFailure(ExportFailure):
    """Pixel rows could not be read for whitespace scanning."""
    pass


class EncodingFailure(ExportFailure):
    """A rendered page could not be encoded or written."""
    pass


class ExportError(Exception):
    """
    User-facing export error.

    Carries a generic message with a retry suggestion; the underlying
    failure is kept as ``__cause__`` and in the log, never in the message.
    """

    def __init__(self, message: str = USER_FAILURE_MESSAGE) -> None:
        super().__init__(message)


class ExportBusyError(ExportError):
    """Rejected because an export is already in progress."""

    def __init__(self, message: str = "An export is already in progress.") -> None:
        super().__init__(message)
