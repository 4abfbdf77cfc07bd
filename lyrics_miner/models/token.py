"""Data model for morphological tokens."""

from dataclasses import dataclass
from typing import Protocol


class TokenLike(Protocol):
    """Anything exposing the two base forms the token filter reads."""

    written_base_form: str
    kana_base_form: str


@dataclass(frozen=True)
class Token:
    """A unit produced by morphological analysis of lyric text."""

    written_base_form: str  # Dictionary (base) written form, e.g. "走る"
    kana_base_form: str  # Base reading in kana, e.g. "ハシル"
    surface: str = ""  # Form as it appeared in the text, e.g. "走っ"

    def __str__(self) -> str:
        return f"{self.written_base_form} ({self.kana_base_form})"
