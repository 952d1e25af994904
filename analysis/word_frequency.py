"""Word frequency counting and top-K selection."""

import heapq
from dataclasses import dataclass
from operator import itemgetter
from pathlib import Path
from typing import Iterable, TextIO, Union

from core.filters import EXCLUDED_WORDS, normalize_words
from core.word_iterator import DEFAULT_CHUNK_SIZE, WordIterator


@dataclass(frozen=True)
class WordCount:
    """A normalized word and how many times it occurred."""
    word: str
    count: int


def count_words(words: Iterable[str]) -> dict[str, int]:
    """
    Tally occurrences of each word.

    Consumes `words` to completion. Iteration order of the result
    carries no meaning.

    Args:
        words: Normalized words

    Returns:
        Dict mapping word -> count (empty for empty input)
    """
    freqs: dict[str, int] = {}
    for word in words:
        freqs[word] = freqs.get(word, 0) + 1
    return freqs


def select_top_words(freqs: dict[str, int], k: int) -> list[WordCount]:
    """
    Select the `k` most frequent words, highest count first.

    Uses a heap-based partial selection instead of sorting the whole
    table. Order among equal counts is unspecified.

    Args:
        freqs: Word -> count mapping
        k: Number of words wanted; clamped to len(freqs)

    Returns:
        List of WordCount, sorted by count descending

    Raises:
        ValueError: If k is negative
    """
    if k < 0:
        raise ValueError(f"k must be >= 0, got {k}")

    k = min(k, len(freqs))
    if k == 0:
        return []

    top = heapq.nlargest(k, freqs.items(), key=itemgetter(1))
    return [WordCount(word, count) for word, count in top]


class WordFrequencyAnalyzer:
    """Runs tokenizer, filter chain and aggregation over a text stream."""

    def __init__(
        self,
        min_length: int = 5,
        stoplist: Iterable[str] = EXCLUDED_WORDS,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ):
        """
        Initialize analyzer.

        Args:
            min_length: Minimum raw token length, inclusive
            stoplist: Words excluded after lowercasing
            chunk_size: Characters per stream read

        Raises:
            ValueError: If min_length is negative
        """
        if min_length < 0:
            raise ValueError(f"min_length must be >= 0, got {min_length}")

        self.min_length = min_length
        self.stoplist = frozenset(stoplist)
        self.chunk_size = chunk_size

    def words(self, stream: TextIO) -> Iterable[str]:
        """Lazily yield normalized words from stream."""
        tokens = WordIterator(stream, chunk_size=self.chunk_size)
        return normalize_words(tokens, self.min_length, self.stoplist)

    def count(self, stream: TextIO) -> dict[str, int]:
        """Count normalized words in stream."""
        return count_words(self.words(stream))

    def top_words(self, stream: TextIO, k: int) -> list[WordCount]:
        """Get the k most frequent normalized words in stream."""
        return select_top_words(self.count(stream), k)


def get_top_words(
    path: Union[str, Path],
    k: int = 100,
    min_length: int = 5,
) -> list[WordCount]:
    """
    Convenience function to get the most frequent words of a text file.

    Args:
        path: Text file to read (UTF-8, undecodable bytes replaced)
        k: Number of words to return
        min_length: Minimum word length

    Returns:
        List of WordCount, highest count first

    Raises:
        OSError: If the file cannot be opened or read
    """
    analyzer = WordFrequencyAnalyzer(min_length=min_length)
    with open(path, "r", encoding="utf-8", errors="replace") as f:
        return analyzer.top_words(f, k)
