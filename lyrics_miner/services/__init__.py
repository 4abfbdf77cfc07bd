"""Service layer for Lyrics Miner."""

from .export_service import ExportService
from .lyrics_loader import LyricsLoaderService
from .token_filter import TokenFilterService, extract_vocabulary
from .tokenizer_service import FugashiTokenizerService

__all__ = [
    "ExportService",
    "FugashiTokenizerService",
    "LyricsLoaderService",
    "TokenFilterService",
    "extract_vocabulary",
]
