"""Service for tokenizing Japanese lyrics with MeCab."""

import logging

import fugashi

from lyrics_miner.config import LyricsMinerConfig
from lyrics_miner.exceptions import TokenizerError
from lyrics_miner.models import Token

logger = logging.getLogger(__name__)


class FugashiTokenizerService:
    """Split lyric text into base-form tokens using fugashi and UniDic."""

    def __init__(self, config: LyricsMinerConfig):
        """Initialize the tokenizer.

        Args:
            config: Configuration holding extra MeCab arguments

        Raises:
            TokenizerError: If MeCab or its dictionary cannot be loaded
        """
        self.config = config
        try:
            self.tagger = fugashi.Tagger(config.tagger_args)
        except RuntimeError as e:
            raise TokenizerError(f"Failed to initialize MeCab tagger: {e}") from e

    def tokenize(self, raw_text: str) -> list[Token]:
        """Split raw text into tokens, one line at a time.

        Args:
            raw_text: Lyrics, possibly spanning several lines

        Returns:
            Tokens in text order

        Raises:
            TokenizerError: If MeCab fails on a line
        """
        tokens = []
        for line in raw_text.splitlines():
            if not line.strip():
                continue
            try:
                words = self.tagger(line)
            except Exception as e:
                raise TokenizerError(f"Failed to tokenize line {line!r}: {e}") from e
            for word_token in words:
                tokens.append(self._to_token(word_token))

        logger.debug(f"Tokenized {len(tokens)} tokens")
        return tokens

    def _to_token(self, word_token) -> Token:
        written = self._extract_written_base_form(word_token)
        return Token(
            written_base_form=written,
            kana_base_form=self._extract_kana_base_form(word_token, written),
            surface=str(word_token.surface),
        )

    def _extract_written_base_form(self, word_token) -> str:
        """Extract the written base form (orthBase) from a word token.

        Unknown words carry no dictionary fields, so their surface form is used.

        Args:
            word_token: MeCab word token

        Returns:
            Written base form string
        """
        try:
            written = word_token.feature.orthBase or word_token.surface
        except AttributeError:
            written = word_token.surface
        return str(written)

    def _extract_kana_base_form(self, word_token, written: str) -> str:
        """Extract the kana base form (kanaBase) from a word token.

        Args:
            word_token: MeCab word token
            written: Written base form, used when no reading is known

        Returns:
            Kana base form string
        """
        feature = word_token.feature
        kana = getattr(feature, "kanaBase", None) or getattr(feature, "kana", None)
        return str(kana or written)
