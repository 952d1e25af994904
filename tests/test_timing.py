"""Tests for timing and size helpers."""

import pytest
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from utils.timing import Stopwatch, file_size_mb


class TestStopwatch:
    """Test the stopwatch."""

    def test_not_started(self):
        assert Stopwatch().elapsed_ms == 0

    def test_stop_freezes(self):
        watch = Stopwatch().start()
        elapsed = watch.stop()
        assert elapsed >= 0
        assert watch.elapsed_seconds == elapsed

    def test_elapsed_ms_is_whole_milliseconds(self):
        """The report prints elapsed_ms as-is, so it must be an int."""
        watch = Stopwatch().start()
        watch.stop()
        assert isinstance(watch.elapsed_ms, int)
        assert watch.elapsed_ms == int(watch.elapsed_seconds * 1000)


class TestFileSize:
    """Test file size reporting."""

    def test_size(self, tmp_path):
        path = tmp_path / "mb.txt"
        path.write_bytes(b"x" * (1024 * 1024))
        assert file_size_mb(path) == pytest.approx(1.0)

    def test_missing(self, tmp_path):
        with pytest.raises(OSError):
            file_size_mb(tmp_path / "nope.txt")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
