"""Tokenizer and token boundary exceptions."""

from .base import LyricsMinerException


class TokenizerError(LyricsMinerException):
    """Raised when the morphological tokenizer cannot be created or fails."""

    pass


class TokenContractError(LyricsMinerException):
    """Raised when a token is missing its written or kana base form."""

    pass
