"""Utility modules."""

from .timing import Stopwatch, file_size_mb

__all__ = ["Stopwatch", "file_size_mb"]
