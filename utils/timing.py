"""Elapsed-time and file size reporting helpers."""

import os
import time
from pathlib import Path
from typing import Optional, Union


class Stopwatch:
    """Measures wall time of a run.

    Usage:
        watch = Stopwatch().start()
        ...
        print(f"Elapsed time was {watch.elapsed_ms} ms")
    """

    def __init__(self):
        self._start_time: Optional[float] = None
        self._stop_time: Optional[float] = None

    def start(self) -> "Stopwatch":
        """Mark the start of processing."""
        self._start_time = time.perf_counter()
        self._stop_time = None
        return self

    def stop(self) -> float:
        """Freeze the elapsed time and return it in seconds."""
        self._stop_time = time.perf_counter()
        return self.elapsed_seconds

    @property
    def elapsed_seconds(self) -> float:
        """Elapsed seconds (0.0 if never started)."""
        if self._start_time is None:
            return 0.0
        end = self._stop_time if self._stop_time is not None else time.perf_counter()
        return end - self._start_time

    @property
    def elapsed_ms(self) -> int:
        """Elapsed whole milliseconds."""
        return int(self.elapsed_seconds * 1000)


def file_size_mb(path: Union[str, Path]) -> float:
    """Size of file in MiB.

    Raises:
        OSError: If the file does not exist or cannot be stat'ed
    """
    return os.path.getsize(path) / (1024.0 * 1024)
