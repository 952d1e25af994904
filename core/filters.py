"""Per-token filter and normalization stages.

The stages must run in this order:
1. drop_short_words  - length check on the raw token
2. to_lower_case     - ASCII-only case folding
3. drop_excluded_words - stoplist check on the lowercased word
"""

from typing import Callable, Iterable, Iterator

# Project Gutenberg boilerplate, not natural-language stopwords
EXCLUDED_WORDS = frozenset({
    "electronic",
    "distributed",
    "copies",
    "copyright",
    "gutenberg",
})

# Only A-Z are folded; no locale or Unicode casing
_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ",
    "abcdefghijklmnopqrstuvwxyz",
)


def drop_short_words(min_length: int) -> Callable[[str], bool]:
    """Predicate keeping words with at least `min_length` characters."""
    if min_length < 0:
        raise ValueError(f"min_length must be >= 0, got {min_length}")

    def keep(word: str) -> bool:
        return len(word) >= min_length

    return keep


def to_lower_case(word: str) -> str:
    """Lowercase ASCII letters, leaving every other character unchanged."""
    return word.translate(_ASCII_LOWER)


def drop_excluded_words(stoplist: Iterable[str] = EXCLUDED_WORDS) -> Callable[[str], bool]:
    """Predicate rejecting words found in the stoplist.

    Expects already lowercased input.
    """
    excluded = frozenset(to_lower_case(w) for w in stoplist)

    def keep(word: str) -> bool:
        return word not in excluded

    return keep


def normalize_words(
    tokens: Iterable[str],
    min_length: int,
    stoplist: Iterable[str] = EXCLUDED_WORDS,
) -> Iterator[str]:
    """
    Apply the full filter chain lazily.

    Args:
        tokens: Raw tokens (e.g. from WordIterator)
        min_length: Minimum token length, inclusive
        stoplist: Words to exclude after lowercasing

    Yields:
        Normalized (lowercased) words that passed every stage
    """
    is_long_enough = drop_short_words(min_length)
    is_allowed = drop_excluded_words(stoplist)

    for token in tokens:
        if not is_long_enough(token):
            continue
        word = to_lower_case(token)
        if is_allowed(word):
            yield word
