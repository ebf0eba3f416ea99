"""
Module: exporter.guard

Purpose:
    Single-permit guard allowing exactly one export in flight. A request
    that arrives while another export runs is rejected, never queued.

Key Classes:
    - ExportGuard: In-process lock with an optional cross-process lock file

Dependencies:
    - threading (std): In-process permit
    - portalocker: Cross-platform lock file (optional)

Used By:
    - exporter.controller: Wraps every export
    - cli: Lock file in the output directory
"""

from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Generator, Optional

import portalocker

from report_pager.exporter.errors import ExportBusyError, ExportError

logger = logging.getLogger(__name__)


class ExportGuard:
    """
    Single-permit export guard.

    Usage:
        guard = ExportGuard()
        with guard.hold():
            ...  # run the export

    Attributes:
        lock_path: Optional lock file shared with other processes
    """

    def __init__(self, lock_path: Optional[Path] = None) -> None:
        self._lock = threading.Lock()
        self.lock_path = lock_path

    @property
    def busy(self) -> bool:
        """True while an export holds the permit."""
        return self._lock.locked()

    @contextmanager
    def hold(self) -> Generator[None, None, None]:
        """
        Hold the permit for the duration of the block.

        Raises:
            ExportBusyError: If another export already holds it
            ExportError: If the lock file cannot be created
        """
        if not self._lock.acquire(blocking=False):
            logger.warning("Export request rejected: another export is in progress")
            raise ExportBusyError()

        try:
            if self.lock_path is None:
                yield
            else:
                with self._hold_file_lock():
                    yield
        finally:
            self._lock.release()

    @contextmanager
    def _hold_file_lock(self) -> Generator[None, None, None]:
        file_lock = portalocker.Lock(
            str(self.lock_path),
            mode="a",
            timeout=0,
            fail_when_locked=True,
        )
        try:
            self.lock_path.parent.mkdir(parents=True, exist_ok=True)
            file_lock.acquire()
        except portalocker.LockException as e:
            logger.warning(f"Export request rejected: {self.lock_path} is locked")
            raise ExportBusyError() from e
        except OSError as e:
            logger.error(f"Cannot create lock file {self.lock_path}: {e}")
            raise ExportError() from e

        try:
            yield
        finally:
            file_lock.release()


# Shared guard for in-process callers that don't manage their own
DEFAULT_GUARD = ExportGuard()
