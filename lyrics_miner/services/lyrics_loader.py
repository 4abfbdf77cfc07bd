"""Service for reading lyrics from files."""

import logging
from pathlib import Path

import pysubs2

from lyrics_miner.config import LyricsMinerConfig
from lyrics_miner.exceptions import LyricsLoadError
from lyrics_miner.utils import clean_lrc_text, clean_subtitle_text

logger = logging.getLogger(__name__)

SUBTITLE_EXTENSIONS = frozenset({".srt", ".ass", ".ssa", ".vtt", ".sub"})
LRC_EXTENSION = ".lrc"


class LyricsLoaderService:
    """Load lyric text from plain text, LRC or subtitle files (stateless service)."""

    def __init__(self, config: LyricsMinerConfig):
        """Initialize the lyrics loader.

        Args:
            config: Configuration holding the text encoding
        """
        self.config = config

    def load(self, lyrics_file: Path) -> str:
        """Read a lyrics file into plain text, one lyric line per line.

        Args:
            lyrics_file: Path to a .txt, .lrc or subtitle file

        Returns:
            Lyric text

        Raises:
            LyricsLoadError: If the file is missing or cannot be parsed
        """
        lyrics_file = Path(lyrics_file)
        if not lyrics_file.is_file():
            raise LyricsLoadError(f"Lyrics file not found: {lyrics_file}")

        suffix = lyrics_file.suffix.lower()
        if suffix in SUBTITLE_EXTENSIONS:
            text = self._load_subtitles(lyrics_file)
        elif suffix == LRC_EXTENSION:
            text = clean_lrc_text(self._read_text(lyrics_file))
        else:
            text = self._read_text(lyrics_file)

        logger.info(f"Loaded {len(text.splitlines())} lyric lines from {lyrics_file.name}")
        return text

    def _read_text(self, lyrics_file: Path) -> str:
        try:
            return lyrics_file.read_text(encoding=self.config.lyrics_encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise LyricsLoadError(f"Failed to read lyrics file: {e}") from e

    def _load_subtitles(self, lyrics_file: Path) -> str:
        try:
            subs = pysubs2.load(str(lyrics_file), encoding=self.config.lyrics_encoding)
        except FileNotFoundError as e:
            raise LyricsLoadError(f"Lyrics file not found: {lyrics_file}") from e
        except Exception as e:
            raise LyricsLoadError(f"Failed to parse lyrics file: {e}") from e

        lines = []
        for line in subs:
            text = clean_subtitle_text(line.text)
            if text:
                lines.append(text)
        return "\n".join(lines)
