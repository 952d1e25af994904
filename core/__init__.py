"""Core text modules for the word cloud generator."""

from .filters import EXCLUDED_WORDS, normalize_words
from .word_iterator import WordIterator, tokenize

__all__ = ["EXCLUDED_WORDS", "WordIterator", "normalize_words", "tokenize"]
