"""Default configuration for the word cloud generator."""

import os
from dataclasses import dataclass, fields
from typing import Mapping, Optional

from dotenv import load_dotenv

from render.styling import check_font_bounds


@dataclass
class Config:
    """Application configuration."""

    # Input
    input_file: str = "data/shakespeare.txt"
    chunk_size: int = 64 * 1024  # characters per read()

    # Vocabulary
    min_length: int = 5   # inclusive, checked before lowercasing
    max_words: int = 100  # K in top-K

    # Rendering
    min_font: int = 20  # px
    max_font: int = 150  # px
    output_dir: str = "."

    def __post_init__(self):
        if self.min_length < 0:
            raise ValueError(f"min_length must be >= 0, got {self.min_length}")
        if self.max_words < 0:
            raise ValueError(f"max_words must be >= 0, got {self.max_words}")
        if self.chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {self.chunk_size}")
        check_font_bounds(self.min_font, self.max_font)


# Environment variable -> Config field
ENV_OVERRIDES = {
    "WORDCLOUD_FILE": "input_file",
    "WORDCLOUD_MIN_LENGTH": "min_length",
    "WORDCLOUD_MAX_WORDS": "max_words",
    "WORDCLOUD_MIN_FONT": "min_font",
    "WORDCLOUD_MAX_FONT": "max_font",
    "WORDCLOUD_OUTPUT_DIR": "output_dir",
}


def load_config(env: Optional[Mapping[str, str]] = None) -> Config:
    """Build Config from defaults plus WORDCLOUD_* environment overrides.

    Args:
        env: Mapping to read overrides from. If None, loads `.env` and uses os.environ

    Returns:
        Validated Config

    Raises:
        ValueError: If an override is not a valid value for its field
    """
    if env is None:
        load_dotenv()
        env = os.environ

    types = {f.name: f.type for f in fields(Config)}
    values = {}
    for var, field_name in ENV_OVERRIDES.items():
        raw = env.get(var)
        if raw is None or raw == "":
            continue
        if types[field_name] in (int, "int"):
            try:
                values[field_name] = int(raw)
            except ValueError:
                raise ValueError(f"{var} must be an integer, got '{raw}'") from None
        else:
            values[field_name] = raw

    return Config(**values)
