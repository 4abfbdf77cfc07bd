"""Protocol for morphological tokenizers."""

from typing import Protocol

from lyrics_miner.models import Token


class Tokenizer(Protocol):
    """Interface for a morphological analyzer that splits text into tokens.

    The extraction pipeline treats segmentation as already correct; any
    analyzer (MeCab via fugashi, a test double, etc.) implements this
    protocol to feed it.
    """

    def tokenize(self, raw_text: str) -> list[Token]:
        """Split raw text into tokens.

        Args:
            raw_text: Japanese text, possibly spanning several lines

        Returns:
            Tokens in text order, each with written and kana base forms

        Raises:
            TokenizerError: If analysis fails
        """
        ...
