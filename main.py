#!/usr/bin/env python3
"""HTML word cloud generator CLI.

Usage:
    python main.py --file data/shakespeare.txt
    python main.py --file book.txt --min 6 --max 50
    python main.py --file book.txt --min-font 12 --max-font 96 --output-dir out
"""

import dataclasses
import sys
from pathlib import Path
from typing import Optional

import click
import numpy as np

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent))

from config import Config, load_config
from analysis.word_frequency import WordFrequencyAnalyzer, select_top_words
from render.html_page import (
    HtmlCloudRenderer,
    OutputWriteError,
    output_path_for,
    render_document,
    write_document,
)
from render.styling import StyleMapper
from utils.timing import Stopwatch, file_size_mb


def generate_cloud(input_path: Path, config: Config, rng: np.random.Generator) -> str:
    """
    Run the whole analysis and return the HTML document.

    The same rng is used first for colors, then for the shuffle.

    Raises:
        OSError: If the input file cannot be opened or read
    """
    analyzer = WordFrequencyAnalyzer(
        min_length=config.min_length,
        chunk_size=config.chunk_size,
    )
    with open(input_path, "r", encoding="utf-8", errors="replace") as f:
        freqs = analyzer.count(f)

    top = select_top_words(freqs, config.max_words)
    entries = StyleMapper(config.min_font, config.max_font, rng).map_entries(top)
    tags = HtmlCloudRenderer(rng).render(entries)
    return render_document(tags, config.max_words, str(input_path))


@click.command()
@click.option("--file", "input_file", default=None, type=click.Path(), help="Input text file")
@click.option("--min", "min_length", default=None, type=click.IntRange(min=0), help="Minimum word length (inclusive)")
@click.option("--max", "max_words", default=None, type=click.IntRange(min=0), help="Number of words to include")
@click.option("--min-font", default=None, type=click.IntRange(min=1), help="Font size (px) of the rarest selected word")
@click.option("--max-font", default=None, type=click.IntRange(min=1), help="Font size (px) of the most frequent word")
@click.option("--output-dir", default=None, type=click.Path(file_okay=False), help="Directory for the .html file")
def main(
    input_file: Optional[str],
    min_length: Optional[int],
    max_words: Optional[int],
    min_font: Optional[int],
    max_font: Optional[int],
    output_dir: Optional[str],
):
    """Render the most frequent words of a text file as an HTML word cloud."""
    overrides = {
        "input_file": input_file,
        "min_length": min_length,
        "max_words": max_words,
        "min_font": min_font,
        "max_font": max_font,
        "output_dir": output_dir,
    }
    try:
        config = dataclasses.replace(
            load_config(),
            **{k: v for k, v in overrides.items() if v is not None},
        )
    except ValueError as e:
        raise click.UsageError(str(e))

    watch = Stopwatch().start()
    input_path = Path(config.input_file)

    try:
        size_mb = file_size_mb(input_path)
    except OSError:
        click.echo(f"Error: File not found: {input_path}", err=True)
        sys.exit(1)
    click.echo(f"Loading {size_mb:.2f} MB from '{input_path}'")

    try:
        document = generate_cloud(input_path, config, np.random.default_rng())
    except OSError as e:
        click.echo(f"Error: Failed to open file: {e}", err=True)
        sys.exit(1)

    outfile = output_path_for(input_path, config.output_dir)
    try:
        write_document(outfile, document)
    except OutputWriteError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(3)
    click.echo(f"written result to '{outfile}'")

    watch.stop()
    click.echo(f"Elapsed time was {watch.elapsed_ms} ms")


if __name__ == "__main__":
    main()
