"""Base exception classes for Lyrics Miner."""


class LyricsMinerException(Exception):
    """Base exception for all Lyrics Miner errors.

    All custom exceptions in the lyrics_miner package should inherit
    from this base class for consistent error handling.
    """

    pass
