"""
Module: exporter.timing

Purpose:
    Timing instrumentation for the export pipeline.

Key Classes:
    - TimingLog: Collects phase durations for one export

Key Functions:
    - timed_phase: Context manager for timing code blocks

Dependencies:
    - time (std)
    - contextlib (std)

Used By:
    - exporter.controller: Times render, paginate, encode and write phases
"""

from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Dict, Generator

logger = logging.getLogger(__name__)


@dataclass
class TimingLog:
    """
    Phase durations for one export, in seconds.

    Example:
        >>> log = TimingLog()
        >>> with timed_phase(log, "render"):
        ...     render()
        >>> log.total
        0.41
    """

    phases: Dict[str, float] = field(default_factory=dict)

    def log_phase(self, phase: str, duration: float) -> None:
        """Record a phase duration (repeated phases accumulate)."""
        self.phases[phase] = self.phases.get(phase, 0.0) + duration

    @property
    def total(self) -> float:
        """Sum of all recorded phases."""
        return sum(self.phases.values())

    def summary(self) -> str:
        """One-line human readable summary."""
        parts = [f"{name}={secs:.2f}s" for name, secs in self.phases.items()]
        return ", ".join(parts) if parts else "no phases"


@contextmanager
def timed_phase(log: TimingLog, phase: str) -> Generator[None, None, None]:
    """Time a block and record it in `log`, even if it raises."""
    start = time.perf_counter()
    try:
        yield
    finally:
        duration = time.perf_counter() - start
        log.log_phase(phase, duration)
        logger.debug(f"Phase {phase} took {duration:.3f}s")
