"""Data models for Lyrics Miner."""

from .processing import ExtractionResult
from .token import Token, TokenLike
from .vocabulary import VocabularyEntry, VocabularySet

__all__ = [
    "Token",
    "TokenLike",
    "VocabularyEntry",
    "VocabularySet",
    "ExtractionResult",
]
