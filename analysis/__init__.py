"""Analysis modules for word frequency."""

from .word_frequency import (
    WordCount,
    WordFrequencyAnalyzer,
    count_words,
    get_top_words,
    select_top_words,
)

__all__ = [
    "WordCount",
    "WordFrequencyAnalyzer",
    "count_words",
    "get_top_words",
    "select_top_words",
]
