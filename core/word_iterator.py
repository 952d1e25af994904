"""Lazy word tokenizer over a character stream."""

import io
import re
from typing import Iterator, TextIO

# ASCII letters plus apostrophe; everything else (digits, symbols,
# non-ASCII characters) is a word boundary.
WORD_PATTERN = re.compile(r"[A-Za-z']+")

DEFAULT_CHUNK_SIZE = 64 * 1024


class WordIterator:
    """Single-pass iterator yielding raw word tokens from a text stream.

    The stream is read in chunks; a run of letters touching the end of a
    chunk is held back and joined with the next chunk, so tokens never
    depend on the chunk size. Apostrophes are kept wherever they appear,
    so "'tis" and "sailors'" come out with their quotes.

    Read errors from the stream propagate to the caller.
    """

    def __init__(self, stream: TextIO, chunk_size: int = DEFAULT_CHUNK_SIZE):
        if chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")
        self._stream = stream
        self._chunk_size = chunk_size
        self._words = self._scan()

    def __iter__(self) -> "WordIterator":
        return self

    def __next__(self) -> str:
        return next(self._words)

    def _scan(self) -> Iterator[str]:
        pending = ""
        while True:
            chunk = self._stream.read(self._chunk_size)
            if not chunk:
                break

            text = pending + chunk
            pending = ""
            for match in WORD_PATTERN.finditer(text):
                if match.end() == len(text):
                    # May continue in the next chunk
                    pending = match.group()
                else:
                    yield match.group()

        if pending:
            yield pending


def tokenize(text: str, chunk_size: int = DEFAULT_CHUNK_SIZE) -> list[str]:
    """Convenience function: tokenize an in-memory string.

    Example:
        tokenize("Hello, World! It's a test-test.")
        -> ["Hello", "World", "It's", "a", "test", "test"]
    """
    return list(WordIterator(io.StringIO(text), chunk_size=chunk_size))
