"""HTML word cloud rendering."""

import html
from pathlib import Path
from typing import Sequence, Union

import numpy as np

from .styling import RankedEntry


DOCUMENT_HEAD = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0, shrink-to-fit=yes">
    <title>Word Frequencies</title>
</head>
<body>
"""

DOCUMENT_TAIL = """</body>
</html>
"""


class OutputWriteError(OSError):
    """Raised when the HTML document cannot be written."""

    def __init__(self, path: Union[str, Path], reason: str = ""):
        self.path = str(path)
        message = f"cannot open outfile {self.path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


def to_span_tag(entry: RankedEntry) -> str:
    """Markup for one word, with its count in the tooltip."""
    word = html.escape(entry.word)
    return (
        f'<span style="font-size: {entry.font_size}px; color: {entry.color};" '
        f'title="The word \'{word}\' occurs {entry.count} times">{word}</span>'
    )


def shuffle_tags(tags: Sequence[str], rng: np.random.Generator) -> list[str]:
    """Return a uniformly random permutation of tags (input untouched)."""
    order = rng.permutation(len(tags))
    return [tags[i] for i in order]


class HtmlCloudRenderer:
    """Turns styled entries into shuffled span tags and a full document."""

    def __init__(self, rng: np.random.Generator):
        """
        Args:
            rng: Random generator for the shuffle; same instance used for colors
        """
        self.rng = rng

    def render(self, entries: Sequence[RankedEntry]) -> list[str]:
        """Span tags for entries, in random display order."""
        tags = [to_span_tag(entry) for entry in entries]
        return shuffle_tags(tags, self.rng)


def render_document(tags: Sequence[str], max_words: int, source_name: str) -> str:
    """
    Assemble the final HTML document.

    Args:
        tags: Span tags in display order
        max_words: Requested number of words (shown as-is in the heading)
        source_name: Input file name for the heading

    Returns:
        Complete HTML text
    """
    parts = [
        DOCUMENT_HEAD,
        f"<h1>The {max_words} most frequent words of <code>{html.escape(source_name)}</code></h1>\n",
    ]
    parts.extend(f"{tag}\n" for tag in tags)
    parts.append(DOCUMENT_TAIL)
    return "".join(parts)


def output_path_for(input_path: Union[str, Path], output_dir: Union[str, Path] = ".") -> Path:
    """'<output_dir>/<input stem>.html', e.g. data/hamlet.txt -> ./hamlet.html"""
    return Path(output_dir) / f"{Path(input_path).stem}.html"


def write_document(path: Union[str, Path], document: str) -> Path:
    """
    Write document to path as UTF-8.

    Raises:
        OutputWriteError: If the file cannot be opened or written
    """
    path = Path(path)
    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(document)
    except OSError as e:
        raise OutputWriteError(path, e.strerror or str(e)) from e
    return path
