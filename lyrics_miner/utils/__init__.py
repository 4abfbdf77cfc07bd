"""Utility functions for Lyrics Miner."""

from .collation import (
    compare_entries,
    compare_entries_legacy,
    compare_japanese,
    japanese_sort_key,
    sort_entries,
)
from .text_utils import (
    clean_lrc_text,
    clean_subtitle_text,
    is_digits_only,
    is_kana_only,
    katakana_to_hiragana,
)

__all__ = [
    "clean_lrc_text",
    "clean_subtitle_text",
    "is_digits_only",
    "is_kana_only",
    "katakana_to_hiragana",
    "compare_entries",
    "compare_entries_legacy",
    "compare_japanese",
    "japanese_sort_key",
    "sort_entries",
]
