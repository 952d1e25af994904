"""Map word counts to font sizes and colors."""

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from analysis.word_frequency import WordCount


@dataclass(frozen=True)
class FrequencyRange:
    """Smallest and largest count among the selected words."""
    min_count: int
    max_count: int

    def __post_init__(self):
        if self.max_count < self.min_count:
            raise ValueError(
                f"max_count ({self.max_count}) is smaller than min_count ({self.min_count})"
            )

    @classmethod
    def from_counts(cls, counts: Sequence[int]) -> "FrequencyRange":
        if len(counts) == 0:
            raise ValueError("Cannot build a frequency range from no counts")
        return cls(min(counts), max(counts))

    @property
    def span(self) -> int:
        return self.max_count - self.min_count

    @property
    def is_degenerate(self) -> bool:
        """All counts equal; there is nothing to interpolate over."""
        return self.span == 0


@dataclass(frozen=True)
class RankedEntry:
    """A selected word with its display attributes."""
    word: str
    count: int
    font_size: int
    color: str


def font_sizes(
    counts: Sequence[int],
    freq_range: FrequencyRange,
    min_font: int,
    max_font: int,
) -> np.ndarray:
    """
    Linearly interpolate font sizes between min_font and max_font.

    min_count maps to min_font and max_count maps to max_font. A
    degenerate range maps everything to min_font. Results are truncated
    to whole pixels.

    Returns:
        Integer array, one size per count
    """
    counts = np.asarray(counts, dtype=np.int64)
    if freq_range.is_degenerate:
        return np.full(counts.shape, min_font, dtype=np.int64)

    # Multiply before dividing so the endpoints come out exact
    offsets = (counts - freq_range.min_count) * (max_font - min_font) / freq_range.span
    return (min_font + offsets).astype(np.int64)


def font_size(count: int, freq_range: FrequencyRange, min_font: int, max_font: int) -> int:
    """Font size for a single count. See font_sizes()."""
    return int(font_sizes([count], freq_range, min_font, max_font)[0])


def check_font_bounds(min_font: int, max_font: int) -> None:
    """
    Validate a font size range.

    Raises:
        ValueError: If min_font is not positive or max_font is below it
    """
    if min_font <= 0:
        raise ValueError(f"min_font must be positive, got {min_font}")
    if max_font < min_font:
        raise ValueError(f"max_font ({max_font}) must not be smaller than min_font ({min_font})")


def random_color(rng: np.random.Generator) -> str:
    """Uniformly random RGB color as '#RRGGBB'."""
    r, g, b = (int(c) for c in rng.integers(0, 256, size=3))
    return f"#{r:02X}{g:02X}{b:02X}"


class StyleMapper:
    """Assigns font size and color to each selected word."""

    def __init__(self, min_font: int, max_font: int, rng: np.random.Generator):
        """
        Initialize mapper.

        Args:
            min_font: Font size (px) for the least frequent selected word
            max_font: Font size (px) for the most frequent selected word
            rng: Random generator for colors; shared with the renderer

        Raises:
            ValueError: If the font bounds are invalid
        """
        check_font_bounds(min_font, max_font)

        self.min_font = min_font
        self.max_font = max_font
        self.rng = rng

    def map_entries(self, entries: Sequence[WordCount]) -> list[RankedEntry]:
        """Build RankedEntry objects, keeping input order."""
        if not entries:
            return []

        counts = [e.count for e in entries]
        freq_range = FrequencyRange.from_counts(counts)
        sizes = font_sizes(counts, freq_range, self.min_font, self.max_font)

        return [
            RankedEntry(
                word=entry.word,
                count=entry.count,
                font_size=int(size),
                color=random_color(self.rng),
            )
            for entry, size in zip(entries, sizes)
        ]
