"""Configuration classes for Lyrics Miner."""

from dataclasses import dataclass, field
from pathlib import Path

# Punctuation, bracket glyphs and romanization noise the tokenizer emits as
# standalone tokens. Matched against the whole written base form.
DEFAULT_DENYLISTED_FORMS: tuple[str, ...] = (
    "*",
    "[",
    "]",
    "　",  # ideographic space
    "”",
    "“",
    "）",
    "「",
    "」",
    "『",
    "（",
    "、",
    "。",
    "!",
    "・",
    "F",
    "J",
    "M",
)


@dataclass(frozen=True)
class LyricsMinerConfig:
    """Immutable configuration for lyric mining sessions.

    All configuration is frozen (immutable) so a session cannot change
    its filtering or ordering rules halfway through processing.
    """

    # Filtering settings
    denylisted_forms: tuple[str, ...] = DEFAULT_DENYLISTED_FORMS

    # Ordering settings
    legacy_collation: bool = False  # Compare written form against the other entry's reading

    # Tokenizer settings
    tagger_args: str = ""  # Extra MeCab arguments passed to fugashi.Tagger

    # Lyrics file settings
    lyrics_encoding: str = "utf-8"

    # Output settings
    preview_limit: int = 20  # Rows shown by the console presenter
    export_directory: Path = field(default_factory=Path.cwd)

    def __post_init__(self):
        """Normalize collection and path fields."""
        if isinstance(self.export_directory, str):
            object.__setattr__(self, "export_directory", Path(self.export_directory))
        if not isinstance(self.denylisted_forms, tuple):
            object.__setattr__(self, "denylisted_forms", tuple(self.denylisted_forms))
