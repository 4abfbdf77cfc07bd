"""Lyrics file and export exceptions."""

from .base import LyricsMinerException


class LyricsLoadError(LyricsMinerException):
    """Raised when a lyrics file cannot be read or parsed."""

    pass


class ExportError(LyricsMinerException):
    """Raised when vocabulary cannot be written to the export destination."""

    pass
