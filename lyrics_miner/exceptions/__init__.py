"""Custom exceptions for Lyrics Miner."""

from .base import LyricsMinerException
from .files import ExportError, LyricsLoadError
from .tokens import TokenContractError, TokenizerError

__all__ = [
    "LyricsMinerException",
    "TokenizerError",
    "TokenContractError",
    "LyricsLoadError",
    "ExportError",
]
