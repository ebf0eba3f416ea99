"""
Module: exporter.output.sequence_writer

Purpose:
    Write encoded pages as a numbered sequence of PNG files, and the
    single-image snapshot.

Key Functions:
    - write_sequence(): Flush all pages of a job, all or nothing
    - write_snapshot(): Write one unsliced image
    - write_atomic(): Temp file + rename write
    - write_temp(): Temp file next to its final location

Algorithm (write_sequence):
    1. Stage every page into a temp file in the output directory
    2. Any staging failure removes the temp files; existing files are
       untouched
    3. Only once all pages are staged, rename them into place

Dependencies:
    - tempfile (std)
    - exporter.output.naming: File names

Used By:
    - exporter.controller: Sequence and snapshot modes
    - exporter.output.pdf_writer: Atomic PDF write
"""

from __future__ import annotations

import logging
import tempfile
from pathlib import Path
from typing import List, Sequence, Tuple

from report_pager.exporter.errors import EncodingFailure

from .encoder import EncodedPage
from .naming import sequence_filename

logger = logging.getLogger(__name__)


def write_sequence(
    encoded: Sequence[EncodedPage],
    output_dir: Path,
    *,
    kind: str,
    subject: str,
    iso_date: str,
) -> List[Path]:
    """
    Write every page to its own PNG file.

    Pages are staged as temp files in `output_dir` and renamed into
    place only after all of them were written, so a failed export
    neither leaves a partial sequence nor touches files from an
    earlier export with the same names.

    Args:
        encoded: Encoded pages in order
        output_dir: Destination directory (created if missing)
        kind: Report kind prefix, e.g. "Report"
        subject: Subject name
        iso_date: Export date, YYYY-MM-DD

    Returns:
        Written paths in page order

    Raises:
        EncodingFailure: If the directory or any file cannot be written

    Example:
        >>> write_sequence(encoded, Path("out"), kind="Report", subject="Jane Doe",
        ...                iso_date="2026-10-19")
        [PosixPath('out/Report_Jane_Doe_2026-10-19_Page01.png'), ...]
    """
    staged: List[Tuple[Path, Path]] = []
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
        for item in encoded:
            path = output_dir / sequence_filename(kind, subject, iso_date, item.page.number)
            staged.append((write_temp(output_dir, item.data, suffix=path.suffix), path))
    except OSError as e:
        logger.error(f"Sequence staging failed after {len(staged)} pages: {e}")
        _discard(temp for temp, _ in staged)
        raise EncodingFailure(f"Could not write page sequence to {output_dir}: {e}") from e

    written: List[Path] = []
    for i, (temp_path, path) in enumerate(staged):
        try:
            temp_path.replace(path)
        except OSError as e:
            logger.error(f"Sequence rename failed at page {i + 1}: {e}")
            _discard(temp for temp, _ in staged[i:])
            raise EncodingFailure(f"Could not move page {i + 1} into {output_dir}: {e}") from e
        written.append(path)

    logger.info(f"Wrote {len(written)} page images to {output_dir}")
    return written


def write_snapshot(data: bytes, path: Path) -> Path:
    """
    Write a single snapshot image.

    Raises:
        EncodingFailure: If the file cannot be written
    """
    try:
        write_atomic(path, data)
    except OSError as e:
        raise EncodingFailure(f"Could not write snapshot {path}: {e}") from e
    logger.info(f"Wrote snapshot to {path}")
    return path


def write_atomic(path: Path, data: bytes) -> None:
    """Write bytes via a temp file in the target directory, then rename."""
    path.parent.mkdir(parents=True, exist_ok=True)
    temp_path = write_temp(path.parent, data, suffix=path.suffix)

    try:
        temp_path.replace(path)
    except OSError:
        temp_path.unlink(missing_ok=True)
        raise


def write_temp(directory: Path, data: bytes, *, suffix: str = "") -> Path:
    """
    Write bytes to a new temp file in `directory`.

    The temp file is removed again if the write fails.

    Returns:
        Path of the temp file
    """
    with tempfile.NamedTemporaryFile(
        mode="wb",
        suffix=suffix,
        dir=directory,
        delete=False,
    ) as f:
        temp_path = Path(f.name)
        try:
            f.write(data)
        except Exception:
            f.close()
            temp_path.unlink(missing_ok=True)
            raise
    return temp_path


def _discard(paths) -> None:
    for path in paths:
        path.unlink(missing_ok=True)
