"""Tests for HTML rendering."""

from collections import Counter

import numpy as np
import pytest
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from render.html_page import (
    HtmlCloudRenderer,
    OutputWriteError,
    output_path_for,
    render_document,
    shuffle_tags,
    to_span_tag,
    write_document,
)
from render.styling import RankedEntry


def make_entries(n: int) -> list[RankedEntry]:
    return [RankedEntry(f"word{chr(97 + i)}", n - i, 20 + i, "#00FF00") for i in range(n)]


class TestSpanTag:
    """Test the per-word markup."""

    def test_markup(self):
        tag = to_span_tag(RankedEntry("hamlet", 42, 150, "#1A2B3C"))
        assert tag == (
            '<span style="font-size: 150px; color: #1A2B3C;" '
            'title="The word \'hamlet\' occurs 42 times">hamlet</span>'
        )

    def test_apostrophe_escaped(self):
        tag = to_span_tag(RankedEntry("o'er", 3, 20, "#000000"))
        assert "o&#x27;er" in tag
        assert "o'er" not in tag


class TestShuffle:
    """Test random display order."""

    def test_preserves_multiset(self):
        tags = ["a", "b", "b", "c", "d", "e", "e", "e"]
        result = shuffle_tags(tags, np.random.default_rng())
        assert Counter(result) == Counter(tags)
        assert len(result) == len(tags)

    def test_input_untouched(self):
        tags = ["a", "b", "c", "d"]
        shuffle_tags(tags, np.random.default_rng(3))
        assert tags == ["a", "b", "c", "d"]

    def test_seeded(self):
        tags = [str(i) for i in range(20)]
        a = shuffle_tags(tags, np.random.default_rng(11))
        b = shuffle_tags(tags, np.random.default_rng(11))
        assert a == b

    def test_empty(self):
        assert shuffle_tags([], np.random.default_rng()) == []


class TestHtmlCloudRenderer:
    """Test rendering entries to shuffled tags."""

    def test_render(self):
        entries = make_entries(5)
        tags = HtmlCloudRenderer(np.random.default_rng(5)).render(entries)
        assert sorted(tags) == sorted(to_span_tag(e) for e in entries)


class TestDocument:
    """Test document assembly."""

    def test_empty_document(self):
        """No words still gives a well-formed page."""
        doc = render_document([], 100, "empty.txt")
        assert doc.startswith("<!DOCTYPE html>")
        assert "<h1>The 100 most frequent words of <code>empty.txt</code></h1>\n</body>" in doc
        assert doc.endswith("</body>\n</html>\n")
        assert "<span" not in doc

    def test_tags_one_per_line_in_order(self):
        doc = render_document(["<span>x</span>", "<span>y</span>"], 2, "a.txt")
        assert "<span>x</span>\n<span>y</span>\n</body>" in doc

    def test_heading_uses_requested_count(self):
        doc = render_document(["<span>x</span>"], 50, "a.txt")
        assert "The 50 most frequent words" in doc


class TestOutput:
    """Test output path and writing."""

    def test_output_path(self):
        assert output_path_for("data/hamlet.txt") == Path("hamlet.html")
        assert output_path_for("/tmp/x/book.v2.txt", "out") == Path("out/book.v2.html")

    def test_write(self, tmp_path):
        path = write_document(tmp_path / "cloud.html", "<html></html>")
        assert path.read_text(encoding="utf-8") == "<html></html>"

    def test_unwritable(self, tmp_path):
        with pytest.raises(OutputWriteError) as exc_info:
            write_document(tmp_path / "missing_dir" / "cloud.html", "x")
        assert "cannot open outfile" in str(exc_info.value)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
