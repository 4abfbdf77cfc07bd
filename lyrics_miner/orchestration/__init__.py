"""Orchestration layer for Lyrics Miner."""

from .lyrics_processor import LyricsProcessor

__all__ = ["LyricsProcessor"]
