"""
Module: exporter.output.naming

Purpose:
    Deterministic artifact names: {kind}_{subject}_{iso_date}[_PageNN].ext

Key Functions:
    - safe_component(): Filesystem-safe name component
    - sequence_filename(): Name of one page image
    - document_filename(): Name of the combined PDF
    - snapshot_filename(): Name of the unsliced image
    - default_kind(): Default report kind per output mode

Used By:
    - exporter.controller: Names output files
"""

from __future__ import annotations

import re

from report_pager.core.models import OutputMode

DEFAULT_KINDS = {
    OutputMode.SEQUENCE: "Report",
    OutputMode.DOCUMENT: "FullReport",
    OutputMode.SNAPSHOT: "Dashboard",
}

_WHITESPACE_RE = re.compile(r"\s+")
_UNSAFE_RE = re.compile(r'[\\/:*?"<>|\x00-\x1f]')


def default_kind(mode: OutputMode) -> str:
    """Default kind prefix for an output mode."""
    return DEFAULT_KINDS[mode]


def safe_component(text: str) -> str:
    """
    Make a name component filesystem-safe.

    Whitespace runs become underscores; path separators and other
    characters invalid in file names are dropped.

    Example:
        >>> safe_component("Jane  Doe")
        'Jane_Doe'
    """
    return _UNSAFE_RE.sub("", _WHITESPACE_RE.sub("_", text.strip()))


def _stem(kind: str, subject: str, iso_date: str) -> str:
    return f"{safe_component(kind)}_{safe_component(subject)}_{iso_date}"


def sequence_filename(kind: str, subject: str, iso_date: str, page_number: int) -> str:
    """
    Name of one page image.

    Example:
        >>> sequence_filename("Report", "Jane Doe", "2026-10-19", 1)
        'Report_Jane_Doe_2026-10-19_Page01.png'
    """
    return f"{_stem(kind, subject, iso_date)}_Page{page_number:02d}.png"


def document_filename(kind: str, subject: str, iso_date: str) -> str:
    """Name of the combined multi-page PDF."""
    return f"{_stem(kind, subject, iso_date)}.pdf"


def snapshot_filename(kind: str, subject: str, iso_date: str) -> str:
    """Name of the unsliced whole-report image."""
    return f"{_stem(kind, subject, iso_date)}.png"
